"""Show the results of a commit message analysis"""

import io
from typing import Iterable, List, Optional

from commitstyle.analysis import Stats
from commitstyle.commitdef import CommitRecord


def blame_lines(commits: Iterable[Optional[CommitRecord]]) -> List[str]:
    "Returns one line naming the author of each violation"
    f = io.StringIO()
    for commit in commits:
        if commit is None:
            continue
        if commit.subject_flagged:
            print(f'{commit.author} went over on subject in {commit.short_hash}', file=f)
        for lineno in commit.body_flagged_lines:
            print(f'{commit.author} went over on body line {lineno} in {commit.short_hash}',
                  file=f)
    f.seek(0)
    return f.readlines()


def summarize_stats(stats: Stats, subject_max: int, body_max: int) -> List[str]:
    f = io.StringIO()
    print(f'Number of commits with subject lines above {subject_max} characters: '
          f'{stats.subject_violations}', file=f)
    print(f'Percentage of commits with subject lines above {subject_max} characters: '
          f'{stats.subject_violation_percent:f}', file=f)
    print(f'Number of commits with body lines over {body_max} characters: '
          f'{stats.commits_with_body_violation}', file=f)
    print(f'Percentage of commit bodies with lines above {body_max} characters: '
          f'{stats.body_commit_violation_percent:f}', file=f)
    print(f'Number of body lines (total) over {body_max} characters: '
          f'{stats.body_line_violations}', file=f)
    print(f'Percentage of body lines above {body_max} characters: '
          f'{stats.body_line_violation_percent:f}', file=f)
    print(f'Total number of commits in dataset: {stats.present_commits}', file=f)
    f.seek(0)
    return f.readlines()


def show_report(stats: Stats, commits: Iterable[Optional[CommitRecord]], blame: bool,
                subject_max: int, body_max: int):
    if blame:
        print(''.join(blame_lines(commits)), end='')
    print(''.join(summarize_stats(stats, subject_max, body_max)), end='')
