from .prompts import build_system_prompt, build_user_prompt
from .normalizer import normalize, normalize_severity

__all__ = ["build_system_prompt", "build_user_prompt", "normalize", "normalize_severity"]
