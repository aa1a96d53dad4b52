# src/bedrock_review/review/parser.py
from dataclasses import dataclass
from unidiff import PatchSet


@dataclass
class DiffFile:
    path: str
    is_new: bool
    is_deleted: bool
    is_binary: bool


def parse_diff(diff_text: str) -> list[DiffFile]:
    """Parse a multi-file unified diff into one entry per changed file."""
    patch = PatchSet(diff_text)
    return [
        DiffFile(
            path=patched_file.path,
            is_new=patched_file.is_added_file,
            is_deleted=patched_file.is_removed_file,
            is_binary=patched_file.is_binary_file,
        )
        for patched_file in patch
    ]
