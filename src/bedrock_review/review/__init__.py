from .parser import parse_diff, DiffFile
from .prompts import build_review_prompt
from .verdict import parse_verdict
from .diff import DiffSource, GitDiffSource
from .engine import ReviewEngine

__all__ = ["parse_diff", "DiffFile", "build_review_prompt", "parse_verdict", "DiffSource", "GitDiffSource", "ReviewEngine"]
