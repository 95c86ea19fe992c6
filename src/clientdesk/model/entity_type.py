# SPDX-License-Identifier: MIT


class EntityType:
    CLIENT = "client"
    TASK = "task"
    PAYMENT = "payment"
    NOTIFICATION = "notification"
