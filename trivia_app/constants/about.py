"""Static metadata describing the trivia quiz."""

APP_NAME = "Japan Trivia Quiz"
APP_VERSION = "0.1"
APP_LICENSE = "MIT License"
COPYRIGHT_NOTICE = "© 2024 Japan Trivia Quiz. All rights reserved."
