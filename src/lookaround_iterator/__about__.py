# SPDX-FileCopyrightText: 2025-present Ron M <ramayer+git@gmail.com>
#
# SPDX-License-Identifier: MIT
__version__ = "0.1.0"
