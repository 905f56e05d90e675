"""Retrieve commit messages from a GitHub repository

A token isn't needed to read public repositories, but the unauthenticated rate limit is low enough
that large repositories can't be read without one. A fine-grained personal access token with no
extra permissions is sufficient.
"""

import concurrent.futures
import json
import logging
import threading
import urllib.parse
from typing import Any, Optional

import requests

from commitstyle import config
from commitstyle import netreq
from commitstyle.commitdef import CommitRecord, split_message


HTTPError = netreq.HTTPError

# See https://docs.github.com/en/rest/commits/commits?apiVersion=2022-11-28
COMMITS_URL = "{api_url}/repos/{owner}/{repo}/commits"
API_VERSION = "2022-11-28"
DATA_TYPE = "application/vnd.github+json"

PAGINATION = 100      # Number to retrieve at once (the API maximum)


class FetchCancelled(Exception):
    """Raised in a page task that was stopped because another one failed."""


def parse_link_header(link: str) -> dict[str, str]:
    """Parse an HTTP Link: header into a dict of relation to URL.

    The header looks like:
        <https://api.github.com/repositories/1/commits?per_page=100&page=2>; rel="next",
        <https://api.github.com/repositories/1/commits?per_page=100&page=9>; rel="last"
    """
    relations = {}
    for item in requests.utils.parse_header_links(link):
        if 'rel' in item and 'url' in item:
            relations[item['rel']] = item['url']
    return relations


def last_page_from_link(link: str) -> int:
    """Return the number of the last page given the Link: header of the first one.

    A response without a "next" relation is the only page.
    """
    relations = parse_link_header(link)
    if 'next' not in relations:
        return 1
    if 'last' not in relations:
        raise RuntimeError(f'No last page in pagination header: {link}')
    query = urllib.parse.parse_qs(urllib.parse.urlsplit(relations['last']).query)
    try:
        last_page = int(query['page'][0])
    except (KeyError, ValueError) as e:
        raise RuntimeError(f'No page number in last page URL: {relations["last"]}') from e
    if last_page < 1:
        raise RuntimeError(f'Invalid last page number in URL: {relations["last"]}')
    return last_page


def decode_commit(entry: dict[str, Any]) -> CommitRecord:
    """Convert one entry from the commits API into a CommitRecord.

    Raises ValueError if the entry doesn't have the expected structure.
    """
    try:
        sha = entry['sha']
        message = entry['commit']['message']
        author = entry['commit']['author']
        name = author['name']
        email = author['email']
    except (KeyError, TypeError) as e:
        raise ValueError(f'Malformed commit entry: {e}') from e
    if not isinstance(message, str):
        raise ValueError(f'Commit message is not text in {sha}')
    subject, body = split_message(message)
    return CommitRecord(subject=subject, body=body, author=f'{name} <{email}>', hash=sha)


class GithubCommitsApi:
    def __init__(self, owner: str, repo: str, token: Optional[str]):
        self.owner = owner
        self.repo = repo
        self.token = token
        self.url = COMMITS_URL.format(api_url=config.expand('github_api_url'),
                                      owner=owner, repo=repo)
        self.max_threads = max(1, config.get('max_fetch_threads'))
        self.http = netreq.Session(pool_size=self.max_threads, headers=self._standard_headers())
        self.cancelled = threading.Event()

    def _standard_headers(self) -> dict[str, str]:
        headers = {"Accept": DATA_TYPE,
                   "X-GitHub-Api-Version": API_VERSION,
                   }
        if self.token:
            headers['Authorization'] = 'Bearer ' + self.token
        return headers

    def get_page(self, page: int) -> tuple[list[Any], str]:
        """Returns the decoded commit entries on one page and the Link: header of the response

        Raises an exception in case of network error or undecodable response.
        """
        params = {"per_page": PAGINATION, "page": page}
        logging.debug('Retrieving %s page %d', self.url, page)
        resp = self.http.get(self.url, params=params)
        resp.raise_for_status()

        j = json.loads(resp.text)
        if not isinstance(j, list):
            raise ValueError(f'Unexpected return type {type(j)} from API')
        return (j, resp.headers.get('Link', ''))

    def _store_page(self, buffer: list[Optional[CommitRecord]], page: int, entries: list[Any]):
        """Write the commits on a page into the buffer.

        Each page owns the slots starting at (page-1)*PAGINATION, so no locking is needed.
        """
        offset = (page - 1) * PAGINATION
        for i, entry in enumerate(entries[:PAGINATION]):
            buffer[offset + i] = decode_commit(entry)

    def _fetch_page_into(self, buffer: list[Optional[CommitRecord]], page: int):
        if self.cancelled.is_set():
            raise FetchCancelled(f'Page {page} skipped')
        entries, _ = self.get_page(page)
        self._store_page(buffer, page, entries)

    def fetch_commits(self) -> list[Optional[CommitRecord]]:
        """Returns all commits in the repository in API order

        The returned list holds a whole number of pages, so slots after the last commit are None.
        Raises the first exception encountered while retrieving a page.
        """
        first_entries, link = self.get_page(1)
        last_page = last_page_from_link(link)
        logging.info('Retrieving %d page(s) of commits from %s/%s',
                     last_page, self.owner, self.repo)
        buffer: list[Optional[CommitRecord]] = [None] * (last_page * PAGINATION)

        if last_page == 1:
            self._store_page(buffer, 1, first_entries)
            return buffer

        self.cancelled.clear()
        with concurrent.futures.ThreadPoolExecutor(
                max_workers=min(last_page, self.max_threads),
                thread_name_prefix='page') as executor:
            futures = {executor.submit(self._fetch_page_into, buffer, page): page
                       for page in range(1, last_page + 1)}
            failure = None
            for future in concurrent.futures.as_completed(futures):
                if future.cancelled():
                    continue
                exc = future.exception()
                if exc and not failure and not isinstance(exc, FetchCancelled):
                    logging.info('Retrieving page %d failed: %s', futures[future], exc)
                    failure = exc
                    # Stop the tasks that haven't sent their request yet
                    self.cancelled.set()
                    for other in futures:
                        other.cancel()
        if failure:
            raise failure
        return buffer
