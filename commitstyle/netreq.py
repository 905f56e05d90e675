"""Network API functions
"""

from typing import Optional

import requests
from requests import adapters

import commitstyle


HTTPError = requests.exceptions.HTTPError
RequestException = requests.exceptions.RequestException

# The User-Agent: header to use
USER_AGENT = f'commitstyle/{commitstyle.__version__}'


class Session(requests.Session):
    """Set up a requests session with a standard configuration

    Failed requests are never retried; the caller treats every failure as fatal.
    pool_size should be at least the number of threads sharing the session, otherwise urllib3
    discards the extra connections and warns about it.
    """

    def __init__(self, pool_size: int = adapters.DEFAULT_POOLSIZE,
                 headers: Optional[dict[str, str]] = None):
        super().__init__()
        self.headers['User-Agent'] = USER_AGENT
        if headers:
            self.headers.update(headers)
        adapter = adapters.HTTPAdapter(pool_connections=pool_size, pool_maxsize=pool_size,
                                       max_retries=0)
        self.mount('https://', adapter)
        self.mount('http://', adapter)
