"""
Base class for all Relais component tests.

Provides a standardized test structure on top of pytest:
- Integrated SystemReporter on every test instance
- Per-test lifecycle hooks (setup_test/teardown_test)
- Native async tests through pytest-asyncio (asyncio_mode = auto)

All component tests should inherit from LaborantTest.

Example:
    class TestMath(LaborantTest):
        component_name = "calculator"
        test_category = "unit"

        def test_addition(self):
            self.reporter.info("Testing addition", context="Test")
            assert 2 + 2 == 4
"""

from typing import Optional

from shared.reporter.system_reporter import SystemReporter


class LaborantTest:
    """
    Base class for component tests.

    Required class attributes:
        component_name: str - Name of component being tested
        test_category: str - Category: "unit", "integration", or "e2e"

    Optional class attributes:
        log_dir: str - Log directory (default: stdout only)
        verbose: int - Reporter verbosity (default: 1)
    """

    component_name: str = "unknown"
    test_category: str = "unit"

    log_dir: Optional[str] = None
    verbose: int = 1

    def setup_method(self, method) -> None:
        """Create the integrated reporter, then run the per-test hook."""
        self.reporter = SystemReporter(
            name=f"{self.component_name}.{self.__class__.__name__}",
            log_dir=self.log_dir,
            verbose=self.verbose,
        )
        self.setup_test()

    def teardown_method(self, method) -> None:
        """Run the per-test cleanup hook."""
        self.teardown_test()

    def setup_test(self) -> None:
        """
        Optional: setup before each test.

        Override in subclass if needed.
        """

    def teardown_test(self) -> None:
        """
        Optional: cleanup after each test.

        Override in subclass if needed.
        """
