"""
Protocols for the collaborators the core talks to.
"""
