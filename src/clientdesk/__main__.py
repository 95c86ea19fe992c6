# SPDX-License-Identifier: MIT

from clientdesk import main

main()
