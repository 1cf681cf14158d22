"""
DevHub feature modules.

- auth: accounts, passwords and bearer tokens
- posts: the feed, with likes and comments embedded in each post
- profiles: developer profiles, experience, education and GitHub repositories

A module exposes a Protocol in interfaces.py; other modules and the API
layer depend on that, never on service.py directly.
"""
