"""Fixed instruction template sent ahead of every diff.

The model's single-line output format depends on this exact text; do not
reword it.
"""

FIXED_TEMPLATE = (
    "You are a Git commit message generator.\n"
    "\n"
    "TASK:\n"
    "Write a SINGLE-LINE Git commit subject summarizing the changes below.\n"
    "\n"
    "HARD RULES:\n"
    "- Output ONLY that one line, nothing else.\n"
    "- No code fences, no quotes, no explanations, no prefixes.\n"
    "- Use imperative mood (e.g., 'fix', 'add', 'update', 'remove').\n"
    "- Do NOT echo the diff or any text other than the commit message.\n"
    "- End output immediately after that line.\n"
    "\n"
    "Diff follows:\n\n"
)


def build_prompt(diff: bytes) -> bytes:
    """Concatenate the template and the diff without altering either.

    Args:
        diff: Raw staged diff bytes.

    Returns:
        The complete prompt as bytes.
    """
    return FIXED_TEMPLATE.encode("utf-8") + diff
