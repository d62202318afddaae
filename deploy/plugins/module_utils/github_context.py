import json
import os

from typing import Mapping, Optional


def commit_sha_from_env(env: Mapping[str, str] = None) -> Optional[str]:
    """Works out the commit being built from the GitHub Actions environment.

    Pull request runs build the head of the PR branch rather than the
    merge commit GitHub puts in GITHUB_SHA.
    """
    if env is None:
        env = os.environ

    if env.get('GITHUB_EVENT_NAME') == 'pull_request':
        event = load_event(env.get('GITHUB_EVENT_PATH'))
        return (event.get('pull_request') or {}).get('head', {}).get('sha')

    return env.get('GITHUB_SHA') or None


def load_event(path: Optional[str]) -> dict:
    if not path or not os.path.isfile(path):
        return {}
    with open(path) as f:
        return json.load(f)
