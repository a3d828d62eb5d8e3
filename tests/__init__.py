"""Test suite for Git Docker Build.

This package contains test modules and fixtures for verifying the functionality
of the Git Docker Build tool. It includes tests for:
- Semantic version classification
- Tag planning and label building
- Git repository inspection
- Docker operations and plan execution
- Configuration handling

The test suite uses pytest and provides fixtures for common test scenarios.
"""
