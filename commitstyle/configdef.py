"""commitstyle default configuration file

Every configuration element ever used in the program must exist here.
These defaults may be overridden in the user's config file.

The variables guaranteed to be available are set in config.environ()
"""


# Maximum number of characters allowed in a commit subject line
subject_max_length = 50

# Maximum number of characters allowed in each line of a commit body
body_max_length = 72

# Base URL of the GitHub REST API
github_api_url = 'https://api.github.com'

# Environment variable holding a GitHub token. The token is optional, but without it the
# unauthenticated rate limit (60 requests per hour) is quickly reached on large repositories.
github_token_var = 'GITHUB_TOKEN'

# Maximum number of commit pages to download at once
max_fetch_threads = 16

# Character map used in git commit logs
git_comment_encoding = 'UTF-8'
