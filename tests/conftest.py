"""Pytest configuration.

The repository is a flat Django project without an installed package. This conftest puts the
repo root on `sys.path` and boots Django once so tests can use the test client and
`call_command` directly.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import django
from django.test.utils import setup_test_environment

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "contactsite.settings")
django.setup()
setup_test_environment()
