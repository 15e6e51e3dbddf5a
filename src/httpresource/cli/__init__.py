# SPDX-FileCopyrightText: 2025 httpresource contributors
# SPDX-License-Identifier: AGPL-3.0-or-later
