from bedrock_review.models.review import NO_FEEDBACK


REVIEW_INSTRUCTIONS = """Act as a code reviewer of a Pull Request, providing feedback on possible bugs and clean code issues.
You are provided with the Pull Request changes in a patch format.
Each patch entry has the code changes (diffs) in a unidiff format.

As a code reviewer, your task is:
- Review only added, edited or deleted lines.
- If there's no bugs and the changes are correct, write only '{no_feedback}'
- If there's bug or incorrect code changes, don't write '{no_feedback}'"""


def build_review_prompt(patch: str) -> str:
    """Build the complete prompt for reviewing one file's patch."""
    instructions = REVIEW_INSTRUCTIONS.format(no_feedback=NO_FEEDBACK)
    return f"{instructions}\n\nPatch:\n{patch}"
