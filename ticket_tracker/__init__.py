"""Jira Ticket Tracker.

Continuously searches Jira for tickets created by (or assigned to) a user in a
project and hands every newly created one to an action:
- Polls the search endpoint every few seconds
- Keeps issues from the target project created since the last poll
- Delivers matches one at a time, in creation order, to a pluggable handler
"""

__version__ = "1.0.0"
