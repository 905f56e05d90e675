"""Get commit messages from a local git repository
"""

import logging
import subprocess
from typing import List

from commitstyle import config
from commitstyle.commitdef import CommitRecord


# git log formats for each commit field
SUBJECT_FORMAT = '%s'
BODY_FORMAT = '%b'
AUTHOR_FORMAT = '%an <%ae>'
HASH_FORMAT = '%H'


class GitLogReader:
    def __init__(self, repo: str):
        self.repo = repo

    def extract_field(self, fmt: str) -> List[str]:
        """Returns one formatted value per commit, newest first.

        Each value is NUL-terminated by git so that multi-line bodies can be told apart.
        Raises subprocess.CalledProcessError if git fails.
        """
        commands = ['git', '-C', self.repo, 'log', '-z', f'--format={fmt}']
        logging.debug('Running: %s', ' '.join(commands))
        p = subprocess.run(commands, stdout=subprocess.PIPE, check=True, text=True,
                           encoding=config.get('git_comment_encoding'))
        values = p.stdout.split('\0')
        # The final terminator leaves an empty item at the end
        if values and not values[-1]:
            del values[-1]
        return values

    def check_top_level(self):
        """Make sure the path is the top of a repository and not a directory inside one.

        git would otherwise quietly use the enclosing repository.
        """
        commands = ['git', '-C', self.repo, 'rev-parse', '--show-cdup']
        logging.debug('Running: %s', ' '.join(commands))
        p = subprocess.run(commands, stdout=subprocess.PIPE, check=True, text=True)
        if p.stdout.strip():
            raise RuntimeError(f'{self.repo} is not the top level of a git repository')

    def read_commits(self) -> List[CommitRecord]:
        "Returns all commits in the repository in log order"
        self.check_top_level()
        subjects = self.extract_field(SUBJECT_FORMAT)
        bodies = self.extract_field(BODY_FORMAT)
        authors = self.extract_field(AUTHOR_FORMAT)
        hashes = self.extract_field(HASH_FORMAT)

        if not len(subjects) == len(bodies) == len(authors) == len(hashes):
            raise RuntimeError(
                f'Inconsistency in git log output: {len(subjects)} subjects, {len(bodies)} bodies, '
                f'{len(authors)} authors, {len(hashes)} hashes')

        # git ends every non-empty body with a newline, which isn't part of the message body
        commits = [CommitRecord(subject=subject, body=body.removesuffix('\n'),
                                author=author, hash=commit_hash)
                   for subject, body, author, commit_hash in zip(subjects, bodies, authors, hashes)]
        logging.info('%d commits extracted from %s', len(commits), self.repo)
        return commits
