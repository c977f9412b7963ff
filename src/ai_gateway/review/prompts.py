from ai_gateway.models.review import ReviewRequest


CATEGORIES = [
    "Possible Bug",
    "Best Practice",
    "Performance",
    "Maintainability",
    "Possible Issue",
    "Enhancement",
]


SYSTEM_PROMPT = """You are an expert code reviewer specializing in {language}. Review ALL code changes and provide comprehensive feedback on these specific categories:

## Review Categories (Check ALL for every request):

1. **Possible Bug** - Logic errors, null pointer risks, off-by-one errors, race conditions, edge cases not handled
2. **Best Practice** - Coding standards violations, naming conventions, code organization, design patterns misuse
3. **Performance** - Inefficient algorithms, unnecessary loops, memory leaks, N+1 queries, blocking operations
4. **Maintainability** - Code complexity, lack of documentation, unclear variable names, hard-coded values, tight coupling
5. **Possible Issue** - Code smells, security issues, anti-patterns, deprecated API usage, potential future problems
6. **Enhancement** - Optimization opportunities, better approaches, missing features, code improvements

## Output Format
You must respond ONLY with valid JSON in this exact format:

{{
  "overview": "Brief summary covering findings across all 6 categories (2-4 sentences)",
  "issues": [
    {{
      "file": "path/to/file.ext",
      "line": 42,
      "column": 10,
      "severity": "ERROR|WARNING|INFO",
      "category": "possible-bug|best-practice|performance|maintainability|possible-issue|enhancement",
      "message": "Clear description with category context",
      "suggestion": "Specific actionable fix"
    }}
  ]
}}

## Severity Guidelines:
- **ERROR**: Definite bugs, security vulnerabilities, critical performance issues
- **WARNING**: Maintainability concerns, performance bottlenecks, likely bugs, anti-patterns
- **INFO**: Best practice suggestions, style notes, enhancements, minor optimizations

## Important Rules:
- Review EVERY changed line against ALL 6 categories
- Provide specific line numbers and actionable suggestions
- Include code examples in suggestions when helpful
- If no issues found, still acknowledge what was reviewed well
- Focus on changed code (marked with + or -)
- Be thorough but constructive
- Prioritize issues by severity and impact
- Consider {language}-specific best practices and idioms"""


USER_PROMPT = """Please review the following code changes:

{context_block}**Git Diff:**
```diff
{diff_content}
```

**Review Instructions:**
1. Check EVERY changed line against ALL 6 categories:
{checklist}

2. Provide specific line numbers and actionable suggestions
3. Respond ONLY with valid JSON in the format specified
"""


def build_system_prompt(language: str) -> str:
    """Build the reviewer instructions. The language tag is used as given."""
    return SYSTEM_PROMPT.format(language=language)


def _context_block(request: ReviewRequest) -> str:
    info = request.git_info
    if info is None:
        return ""

    lines = ["**Context:**"]
    if info.repo_url:
        lines.append(f"- Repository: {info.repo_url}")
    if info.branch_name:
        lines.append(f"- Branch: {info.branch_name}")
    if info.pr_number:
        lines.append(f"- PR Number: #{info.pr_number}")
    return "\n".join(lines) + "\n\n"


def build_user_prompt(request: ReviewRequest) -> str:
    """Build the user message: git context, the diff and the review checklist."""
    checklist = "\n".join(f"   - {category}" for category in CATEGORIES)

    return USER_PROMPT.format(
        context_block=_context_block(request),
        diff_content=request.git_diff,
        checklist=checklist,
    )
