"""
Pytest Configuration and Fixtures

This module provides:
- Timestamped result file generation
- Shared fixtures for all tests
"""

import pytest
import sys
from datetime import datetime
from pathlib import Path
from typing import List, Dict, Any

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from tests.test_config import CONFIG, EXPECTED, TEST_DATA, TEST_CATEGORIES, write_posts


# =============================================================================
# TEST RESULT FILE CONFIGURATION
# =============================================================================

RESULTS_DIR = PROJECT_ROOT / "test_results"


def get_result_filename() -> str:
    """Generate timestamped result filename."""
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return f"test_results_{timestamp}.txt"


class TestResultCollector:
    """Collects test results for formatted output."""

    __test__ = False

    def __init__(self):
        self.results: List[Dict[str, Any]] = []
        self.start_time: datetime = None
        self.end_time: datetime = None

    def add_result(self, nodeid: str, outcome: str, duration: float, message: str = ""):
        filename = nodeid.split("::")[0].split("/")[-1]
        self.results.append({
            "nodeid": nodeid,
            "category": filename.replace("test_", "").replace(".py", ""),
            "name": nodeid.split("::")[-1].replace("test_", "").replace("_", " "),
            "outcome": outcome,
            "duration": duration,
            "message": message,
        })

    def count(self, outcome: str) -> int:
        return sum(1 for r in self.results if r["outcome"] == outcome)


_collector = TestResultCollector()


# =============================================================================
# PYTEST HOOKS
# =============================================================================

def pytest_configure(config):
    """Register markers and start the result collector."""
    config.addinivalue_line("markers", "config_validation: Configuration validation tests")
    config.addinivalue_line("markers", "cli_behavior: CLI interface tests")
    _collector.start_time = datetime.now()


def pytest_runtest_logreport(report):
    """Record the outcome of each test call."""
    if report.when == "call":
        _collector.add_result(
            nodeid=report.nodeid,
            outcome=report.outcome,
            duration=report.duration,
            message=str(report.longrepr) if report.longrepr else "",
        )


def pytest_sessionfinish(session, exitstatus):
    """Write the formatted report to test_results/."""
    _collector.end_time = datetime.now()
    if not _collector.results:
        return

    RESULTS_DIR.mkdir(exist_ok=True)
    filepath = RESULTS_DIR / get_result_filename()
    filepath.write_text(generate_formatted_report(_collector), encoding="utf-8")
    print(f"\n📄 Test results saved to: {filepath}")


def generate_formatted_report(collector: TestResultCollector) -> str:
    """Generate a formatted test report grouped by category."""
    total = len(collector.results)
    passed = collector.count("passed")
    failed = collector.count("failed")

    lines = [
        "=" * 80,
        "MARKDOWN BLOG - TEST RESULTS REPORT",
        "=" * 80,
        f"Run Date:     {collector.start_time.strftime('%Y-%m-%d %H:%M:%S')}",
        f"Total Tests:  {total}",
        f"Passed:       {passed} ✓",
        f"Failed:       {failed} ✗",
        f"Pass Rate:    {(passed / max(total, 1) * 100):.1f}%",
        "",
    ]

    categories: Dict[str, List[Dict[str, Any]]] = {}
    for result in collector.results:
        categories.setdefault(result["category"], []).append(result)

    for category, results in sorted(categories.items()):
        info = TEST_CATEGORIES.get(category, {"name": category.title(), "description": ""})
        lines.append(f"{info['name']} - {info['description']}")
        for result in results:
            status = "✓" if result["outcome"] == "passed" else "✗" if result["outcome"] == "failed" else "○"
            lines.append(f"    {status} {result['name']:<60} ({result['duration']*1000:.0f}ms)")
            if result["outcome"] == "failed" and result["message"]:
                for msg_line in result["message"].split("\n")[:3]:
                    if msg_line.strip():
                        lines.append(f"      └─ {msg_line[:70]}")
        lines.append("")

    lines.append("=" * 80)
    return "\n".join(lines)


# =============================================================================
# SHARED FIXTURES
# =============================================================================

@pytest.fixture
def test_config():
    """Provide access to test configuration."""
    return CONFIG


@pytest.fixture
def expected_values():
    """Provide access to expected values."""
    return EXPECTED


@pytest.fixture
def content_dir(tmp_path):
    """A content directory holding the valid sample posts."""
    directory = tmp_path / "content"
    directory.mkdir()
    write_posts(directory, TEST_DATA["valid_posts"])
    return directory


@pytest.fixture
def empty_content_dir(tmp_path):
    """An existing but empty content directory."""
    directory = tmp_path / "empty"
    directory.mkdir()
    return directory


@pytest.fixture
def sample_post():
    """A parsed Post whose body has a code block and a blockquote."""
    from src.content.parser import parse_post_text
    return parse_post_text(TEST_DATA["valid_posts"]["second-post"], slug="second-post")
