"""Unit tests.

Purpose
- Verify a single module/function in isolation.

Guidelines
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
