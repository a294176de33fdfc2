#!/usr/bin/env python3
"""
Main test runner for the Lox scanner tests.

Author: xwest
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_smoke_test():
    """Scan a small program end to end and show the tokens."""

    print("🚀 Lox Scanner Test Suite")
    print("=" * 60)

    try:
        from lox.lexer import Lexer, StderrReporter
        print("✅ Lexer modules imported successfully")
        print()
    except ImportError as e:
        print(f"❌ Failed to import lexer modules: {e}")
        return False

    code = """
    // greeting
    fun greet(name) {
        print "Hello, " + name;
    }
    var count = 10.5;
    if (count >= 3) greet("world");
    """

    print("Testing a small program...")
    reporter = StderrReporter()
    lexer = Lexer(code, "<smoke>", reporter)
    tokens = lexer.tokenize()
    print(f"     Generated {len(tokens)} tokens")
    for token in tokens:
        print(f"     line {token.line:>2}: {token.to_string()}")

    if reporter.had_error:
        print("❌ Smoke test reported lexical errors")
        return False

    print("✅ Smoke test PASSED")
    print()
    return True


def run_all_tests():
    """Run every unittest-style test module under tests/."""
    if not run_smoke_test():
        return False

    loader = unittest.TestLoader()
    suite = loader.discover(os.path.join(project_root, "tests"), pattern="test_*.py")
    result = unittest.TextTestRunner(verbosity=2).run(suite)
    return result.wasSuccessful()


if __name__ == "__main__":
    success = run_all_tests()
    sys.exit(0 if success else 1)
