"""Git commit record structure."""

from dataclasses import dataclass, field


# Separator between the subject and the body of a commit message
PARAGRAPH_SEPARATOR = '\n\n'


@dataclass
class CommitRecord:
    """A commit message along with the style violations found in it.

    The flag fields are only written by the analysis pass after the record has been created.
    """

    subject: str = ''
    body: str = ''
    author: str = ''             # "Name <email>"
    hash: str = ''               # git commit hash
    subject_flagged: bool = False
    body_flagged_lines: list[int] = field(default_factory=list)  # 0-based line indices in body

    def mark_subject(self):
        self.subject_flagged = True

    def mark_body(self, lineno: int):
        self.body_flagged_lines.append(lineno)

    @property
    def short_hash(self) -> str:
        return self.hash[:8]


def split_message(message: str) -> tuple[str, str]:
    """Split a raw commit message into its subject and body.

    The split happens at the first blank line. The body is empty if there is no blank line.
    """
    subject, _, body = message.partition(PARAGRAPH_SEPARATOR)
    return (subject, body)
