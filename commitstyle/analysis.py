"""Code to check commit messages against the 50/72 rule."""

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Optional

from commitstyle.commitdef import CommitRecord

# Traditional limits of the rule
SUBJECT_MAX = 50
BODY_MAX = 72


def percentage(count: int, total: int) -> float:
    """Return count as a percentage of total.

    A total of zero has no meaningful percentage so NaN is returned.
    """
    if not total:
        logging.warning('Percentage of %d out of no items is undefined', count)
        return math.nan
    return 100 * count / total


@dataclass
class Stats:
    """Aggregate rule violations over a set of commits."""

    present_commits: int = 0
    subject_violations: int = 0
    commits_with_body_violation: int = 0
    body_lines: int = 0
    body_line_violations: int = 0

    @property
    def subject_violation_percent(self) -> float:
        return percentage(self.subject_violations, self.present_commits)

    @property
    def body_commit_violation_percent(self) -> float:
        return percentage(self.commits_with_body_violation, self.present_commits)

    @property
    def body_line_violation_percent(self) -> float:
        return percentage(self.body_line_violations, self.body_lines)


def analyze(commits: Iterable[Optional[CommitRecord]],
            subject_max: int = SUBJECT_MAX, body_max: int = BODY_MAX) -> Stats:
    """Flag the violations in each commit and count them.

    None entries are placeholders for commits that don't exist and are ignored.
    """
    stats = Stats()
    for commit in commits:
        if commit is None:
            continue
        stats.present_commits += 1

        if len(commit.subject) > subject_max:
            stats.subject_violations += 1
            commit.mark_subject()

        # An empty body still counts as a single (empty) line
        for lineno, line in enumerate(commit.body.split('\n')):
            stats.body_lines += 1
            if len(line) > body_max:
                stats.body_line_violations += 1
                # Only the first long line in a body counts against the commit
                if not commit.body_flagged_lines:
                    stats.commits_with_body_violation += 1
                commit.mark_body(lineno)

    logging.info('%d commits analyzed', stats.present_commits)
    return stats
