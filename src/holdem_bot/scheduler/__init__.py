#!/usr/bin/env python3
"""
Scheduler module for pacing bot actions.

Public API:
    - ActionScheduler: FIFO queue running one action per fixed delay
    - enqueue_bot_action: Queue on the shared default scheduler
"""

from holdem_bot.scheduler.action_scheduler import ActionScheduler, enqueue_bot_action, BOT_ACTION_DELAY

__all__ = ['ActionScheduler', 'enqueue_bot_action', 'BOT_ACTION_DELAY']
