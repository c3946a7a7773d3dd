from typing import NewType

RepoName = NewType("RepoName", str)
