"""Tests for matcher and container benchmarking."""

from unittest.mock import patch

import pytest

from xml_tag_checker.matching.benchmarks import (
    CONTAINER_SUBJECT,
    MATCHER_SUBJECT,
    BenchmarkResult,
    BenchmarkSuite,
    MatcherBenchmark,
)


class TestBenchmarkResult:
    """Test benchmark result data structure."""

    def test_operations_per_second(self):
        """Test throughput calculation."""
        result = BenchmarkResult(
            subject=MATCHER_SUBJECT,
            test_case="doc",
            processing_time_ms=100.0,
            memory_used_mb=1.0,
            operations=1000,
            success=True,
        )
        assert result.operations_per_second == 10000.0
        assert result.error_message is None

    def test_zero_time(self):
        """Test zero processing time gives zero throughput."""
        result = BenchmarkResult(MATCHER_SUBJECT, "doc", 0.0, 0.0, 10, True)
        assert result.operations_per_second == 0.0


class TestBenchmarkSuite:
    """Test result aggregation."""

    def _suite(self):
        suite = BenchmarkSuite()
        suite.add_result(BenchmarkResult(MATCHER_SUBJECT, "a", 10.0, 1.0, 100, True))
        suite.add_result(BenchmarkResult(MATCHER_SUBJECT, "b", 20.0, 3.0, 100, True))
        suite.add_result(BenchmarkResult(CONTAINER_SUBJECT, "c", 5.0, 0.0, 50, False, "boom"))
        return suite

    def test_filters(self):
        """Test filtering by subject and test case."""
        suite = self._suite()
        assert len(suite.get_results_by_subject(MATCHER_SUBJECT)) == 2
        assert suite.get_results_by_test_case("c")[0].error_message == "boom"

    def test_statistics(self):
        """Test statistics over successful runs."""
        stats = self._suite().get_statistics(MATCHER_SUBJECT, "memory_used_mb")
        assert stats["min"] == 1.0
        assert stats["max"] == 3.0
        assert stats["mean"] == 2.0
        assert stats["count"] == 2

    def test_statistics_empty(self):
        """Test statistics for a subject without successful runs."""
        assert self._suite().get_statistics(CONTAINER_SUBJECT, "memory_used_mb") == {}

    def test_generate_report(self):
        """Test report structure."""
        report = self._suite().generate_report()
        assert report["total_results"] == 3
        assert report["summary"][MATCHER_SUBJECT]["successful_runs"] == 2
        assert report["summary"][CONTAINER_SUBJECT]["successful_runs"] == 0
        assert report["detailed_results"]["c"]["error"] == "boom"


class TestMatcherBenchmark:
    """Test running the benchmark."""

    def test_invalid_parameters(self):
        """Test parameter validation."""
        with pytest.raises(ValueError, match="document_size must be > 0"):
            MatcherBenchmark(document_size=0)
        with pytest.raises(ValueError, match="benchmark_runs must be > 0"):
            MatcherBenchmark(benchmark_runs=0)
        with pytest.raises(ValueError, match="warmup_runs must be >= 0"):
            MatcherBenchmark(warmup_runs=-1)

    def test_synthetic_documents(self):
        """Test the synthetic documents have the intended shape."""
        benchmark = MatcherBenchmark(document_size=5)
        assert benchmark.matcher.check_lines(
            benchmark.documents["balanced_document"]
        ).is_well_formed
        assert benchmark.matcher.check_lines(
            benchmark.documents["deeply_nested_document"]
        ).metrics.max_depth == 5
        mismatched = benchmark.matcher.check_lines(benchmark.documents["mismatched_document"])
        assert not mismatched.is_well_formed

    def test_run_benchmark(self):
        """Test a small run produces one result per case."""
        benchmark = MatcherBenchmark(document_size=10, warmup_runs=0, benchmark_runs=2)
        suite = benchmark.run_benchmark()
        cases = {r.test_case for r in suite.results}
        assert cases == set(benchmark.documents) | set(benchmark.container_workloads)
        assert all(r.success for r in suite.results)
        matcher_results = suite.get_results_by_subject(MATCHER_SUBJECT)
        assert {r.operations for r in matcher_results} == {
            len(lines) for lines in benchmark.documents.values()
        }

    def test_matcher_only(self):
        """Test container workloads can be skipped."""
        benchmark = MatcherBenchmark(document_size=5, warmup_runs=0, benchmark_runs=1)
        suite = benchmark.run_benchmark(include_containers=False)
        assert suite.get_results_by_subject(CONTAINER_SUBJECT) == []

    def test_failed_run_recorded(self):
        """Test a failing workload is recorded instead of raised."""
        benchmark = MatcherBenchmark(document_size=5, warmup_runs=0, benchmark_runs=1)
        with patch.object(benchmark.matcher, "check_lines", side_effect=RuntimeError("boom")):
            suite = benchmark.run_benchmark(include_containers=False)
        assert all(not r.success for r in suite.results)
        assert suite.results[0].error_message == "boom"
