"""
Configuration Module for Git Docker Build

This module contains configuration settings and constants used throughout the application.
It defines defaults for the build configuration, the well-known image label keys
and the environment variables that back every command line option.

Constants:
    DEFAULT_REGISTRY: Registry used when none is configured
    DEFAULT_VENDOR: Vendor label used when none is configured
    LABEL_*: Image label keys (label-schema.org convention)
    ENV_PREFIX: Prefix shared by all environment variable fallbacks
    TRUTHY_VALUES: Environment values interpreted as boolean true
"""

DEFAULT_REGISTRY = "docker.52north.org"
DEFAULT_VENDOR = "52°North GmbH"
DEFAULT_DOCKERFILE = "Dockerfile"
DEFAULT_REMOTE = "origin"
LATEST_TAG = "latest"

LABEL_SCHEMA_VERSION_VALUE = "1.0"

LABEL_SCHEMA_VERSION = "org.label-schema.schema-version"
LABEL_BUILD_DATE = "org.label-schema.build-date"
LABEL_VENDOR = "org.label-schema.vendor"
LABEL_LICENSE = "org.label-schema.license"
LABEL_VCS_URL = "org.label-schema.vcs-url"
LABEL_VCS_REF = "org.label-schema.vcs-ref"
LABEL_URL = "org.label-schema.url"
LABEL_VERSION = "org.label-schema.version"
LABEL_MAINTAINER = "maintainer"

BUILD_DATE_FORMAT = "%Y-%m-%dT%H:%M:%SZ"

ENV_PREFIX = "DOCKER_BUILD_"
TRUTHY_VALUES = {"1", "true", "yes", "on"}
