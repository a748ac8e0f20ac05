"""Application environment types.

Defines the different runtime environments for the album client.
Used by Settings to pick the log renderer.

Environments:
- DEVELOPMENT: Local runs, human-readable colored logs
- TESTING: Automated test execution, JSON logs
- CI: Continuous integration environment, JSON logs
- PRODUCTION: Deployed runs, JSON logs
"""

from enum import Enum


class Environment(str, Enum):
    """Application environment types."""

    DEVELOPMENT = "development"
    TESTING = "testing"
    CI = "ci"
    PRODUCTION = "production"
