#!/usr/bin/env python3
"""
Complete parser-utils Test Suite Runner
Executes all unit and integration tests with detailed reporting
"""

import os
import sys
import subprocess

UNIT_TEST_FILES = [
    "tests/unit/test_merge_utils.py",
    "tests/unit/test_normalize.py",
    "tests/unit/test_config.py",
]

INTEGRATION_TEST_FILES = [
    "tests/integration/test_extend_cli.py",
]


def run_command(cmd, cwd=None):
    """Run a command and return result"""
    try:
        result = subprocess.run(cmd, capture_output=True, text=True, cwd=cwd)
        return result.returncode == 0, result.stdout, result.stderr
    except OSError as e:
        return False, "", str(e)


def run_test_files(title, test_files):
    """Run each test file with pytest"""
    print(f"\n{title}")
    print("-" * 50)

    passed = 0
    failed = 0

    for test_file in test_files:
        if os.path.exists(test_file):
            print(f"Running {test_file}...")
            success, stdout, stderr = run_command(
                [sys.executable, "-m", "pytest", test_file, "-v"]
            )
            if success:
                print(f"✅ PASS: {test_file}")
                passed += 1
            else:
                print(f"❌ FAIL: {test_file}")
                print(f"Error: {stdout[-2000:]}{stderr}")
                failed += 1
        else:
            print(f"⚠️  SKIP: {test_file} (not found)")

    return passed, failed


def main():
    print("=" * 60)
    print("🚀 COMPLETE PARSER-UTILS TEST SUITE EXECUTION")
    print("=" * 60)

    total_passed = 0
    total_failed = 0

    p, f = run_test_files("🧪 Running Unit Tests...", UNIT_TEST_FILES)
    total_passed += p
    total_failed += f

    p, f = run_test_files("🔗 Running Integration Tests...", INTEGRATION_TEST_FILES)
    total_passed += p
    total_failed += f

    # Final summary
    print("\n" + "=" * 60)
    print("📊 COMPLETE TEST RESULTS SUMMARY")
    print("=" * 60)
    print(f"✅ TOTAL PASSED: {total_passed}")
    print(f"❌ TOTAL FAILED: {total_failed}")
    print(f"🎯 OVERALL: {'SUCCESS' if total_failed == 0 else 'FAILURE'}")

    if total_failed > 0:
        print(f"\n🔧 {total_failed} test file(s) failed - check output above for details")
        sys.exit(1)
    else:
        print("\n🎉 ALL TESTS PASSED!")
        sys.exit(0)


if __name__ == "__main__":
    main()
