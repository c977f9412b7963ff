from pydantic import BaseModel


class GitUser(BaseModel):
    name: str = ""
    email: str = ""


class GitInfo(BaseModel):
    commit_hash: str = ""
    branch_name: str = ""
    pr_number: str = ""
    repo_url: str = ""
    author: GitUser | None = None
    committer: GitUser | None = None


class ReviewRequest(BaseModel):
    ai_model: str = ""
    ai_provider: str = ""
    language: str = ""
    review_mode: str = ""
    git_diff: str = ""
    git_info: GitInfo | None = None
