"""
Behavior Contract Tests - Collaborator Contracts

These tests define the expected behavior of the frame source and pointer
collaborators and can be run against:
1. The X11 implementations (with a mocked display connection)
2. The in-memory test doubles used by the rest of the suite

Tests are independent of implementation details and focus on observable behavior.
"""
