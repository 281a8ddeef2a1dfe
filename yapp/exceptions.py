"""
# Yapp: exceptions.py

Licensed under "MIT No Attribution" (MIT-0), see LICENSE.

Exception classes.
"""


class CommittedMutateException(Exception):
    pass


class EmptyPatternException(Exception):
    pass


class HostProtocolException(Exception):
    pass


class UncommittedApplyException(Exception):
    pass
