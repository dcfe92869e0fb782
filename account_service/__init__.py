# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Account service: sign-in, bearer sessions and account creation."""

__version__ = "0.1.0"
