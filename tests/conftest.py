"""Shared fixtures."""

import pytest
import yaml


@pytest.fixture
def env_file(tmp_path):
    """Write an environment file and return its path."""
    def _write(content: dict, name: str = 'environments.yaml'):
        path = tmp_path / name
        with open(path, 'w') as f:
            yaml.dump(content, f)
        return path
    return _write


@pytest.fixture
def sample_environments():
    return {
        'version': '1',
        'active': 'dev',
        'environments': {
            'dev': {
                'base_url': 'https://{{host}}',
                'host': 'api.dev.example.com',
                'api_key': 'dev-key',
            },
            'prod': {
                'base_url': 'https://api.example.com',
                'api_key': 'prod-key',
            },
        },
    }
