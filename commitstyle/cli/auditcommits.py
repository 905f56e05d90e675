"""Check the commit messages in a repository against the 50/72 rule
"""

import argparse
import logging
import os
import subprocess
import sys
from typing import List, Optional

from commitstyle import analysis
from commitstyle import argparsing
from commitstyle import config
from commitstyle import log
from commitstyle import netreq
from commitstyle import summarize
from commitstyle import urls
from commitstyle.commitdef import CommitRecord
from commitstyle.ingest import githubapi
from commitstyle.ingest import localgit


def read_token(args: argparse.Namespace) -> Optional[str]:
    """Return the GitHub token, if any.

    A token in --authfile takes precedence over the one in the environment.
    """
    if args.authfile:
        with open(args.authfile) as f:
            return f.read().strip()
    token = os.environ.get(config.get('github_token_var'))
    if not token:
        logging.info('No GitHub token available; the API rate limit will be low')
    return token


def load_commits(identifier: str, token: Optional[str]) -> List[Optional[CommitRecord]]:
    """Returns the commits in the repository, from a local directory or from GitHub."""
    if urls.resolve_source(identifier) == urls.Source.LOCAL:
        logging.info('Reading local repository %s', identifier)
        reader = localgit.GitLogReader(os.path.expanduser(identifier))
        return reader.read_commits()

    owner, repo = urls.get_project_name(identifier)
    logging.info('Reading GitHub repository %s/%s', owner, repo)
    api = githubapi.GithubCommitsApi(owner, repo, token)
    return api.fetch_commits()


def audit(args: argparse.Namespace):
    commits = load_commits(args.repository, read_token(args))
    subject_max = config.get('subject_max_length')
    body_max = config.get('body_max_length')
    stats = analysis.analyze(commits, subject_max, body_max)
    summarize.show_report(stats, commits, args.blame, subject_max, body_max)


def parse_args(args=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description='Report how well commit messages follow the 50/72 rule')
    argparsing.arguments_logging(parser)
    argparsing.arguments_config(parser)
    argparsing.arguments_github(parser)
    parser.add_argument(
        '--blame',
        action='store_true',
        help='Show the author and hash of each offending commit')
    parser.add_argument(
        'repository',
        nargs='?',
        help='Path to a local git repository, or a GitHub repository as owner/name or URL')
    parsed = parser.parse_args(args=args)
    if not parsed.repository:
        parser.print_usage()
    return parsed


def main() -> int:
    args = parse_args()
    if not args.repository:
        return 0
    log.setup(args)

    try:
        audit(args)
    except (subprocess.CalledProcessError, OSError,
            netreq.RequestException, ValueError, RuntimeError) as e:
        logging.error('%s', e)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
