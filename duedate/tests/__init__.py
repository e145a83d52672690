"""Test suite for the duedate system.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - Minimal dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations

3. fakes/: Port implementations for testing
   - In-memory implementation of LoggerPort
   - Used by core unit tests
"""
