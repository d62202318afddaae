import json
import os
import tempfile
import unittest

from .....plugins.module_utils.github_context import commit_sha_from_env


class GithubContextTester(unittest.TestCase):

    def test_push_uses_github_sha(self):
        env = {'GITHUB_EVENT_NAME': 'push', 'GITHUB_SHA': 'abc123'}

        assert commit_sha_from_env(env) == 'abc123'

    def test_pull_request_uses_head_sha(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, 'event.json')
            with open(path, 'w') as f:
                json.dump({'pull_request': {'head': {'sha': 'def456'}}}, f)

            env = {
                'GITHUB_EVENT_NAME': 'pull_request',
                'GITHUB_EVENT_PATH': path,
                'GITHUB_SHA': 'merge789',
            }
            assert commit_sha_from_env(env) == 'def456'

    def test_pull_request_without_event_file(self):
        env = {'GITHUB_EVENT_NAME': 'pull_request', 'GITHUB_SHA': 'merge789'}

        assert commit_sha_from_env(env) is None

    def test_outside_github(self):
        assert commit_sha_from_env({}) is None
