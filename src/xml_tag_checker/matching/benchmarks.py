"""Performance benchmarking for tag matching and its containers.

This module times ``TagMatcher`` over synthetic documents and the container
workloads the matcher depends on, samples process memory with ``psutil``,
and aggregates repeated runs into a ``BenchmarkSuite`` report.
"""

import gc
import statistics
import time
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

import psutil

from xml_tag_checker.containers import ArraySequence, LinkedSequence, Queue, Stack
from xml_tag_checker.shared import get_logger

from .matcher import TagMatcher

MS_PER_SECOND = 1000
BYTES_PER_MB = 1024 * 1024

MATCHER_SUBJECT = "tag_matcher"
CONTAINER_SUBJECT = "containers"


@dataclass
class BenchmarkResult:
    """Result of a single benchmark run."""

    subject: str
    test_case: str
    processing_time_ms: float
    memory_used_mb: float
    operations: int
    success: bool
    error_message: Optional[str] = None

    @property
    def operations_per_second(self) -> float:
        """Calculate operations (lines or container calls) per second."""
        if self.processing_time_ms <= 0:
            return 0.0
        return (self.operations * 1000.0) / self.processing_time_ms


@dataclass
class BenchmarkSuite:
    """Collection of benchmark results with statistical analysis."""

    results: List[BenchmarkResult] = field(default_factory=list)
    suite_name: str = "Tag Matching Benchmark"
    timestamp: float = field(default_factory=time.time)

    def add_result(self, result: BenchmarkResult) -> None:
        """Add a benchmark result to the suite."""
        self.results.append(result)

    def get_results_by_subject(self, subject: str) -> List[BenchmarkResult]:
        return [r for r in self.results if r.subject == subject]

    def get_results_by_test_case(self, test_case: str) -> List[BenchmarkResult]:
        return [r for r in self.results if r.test_case == test_case]

    def get_statistics(self, subject: str, metric: str) -> Dict[str, float]:
        """Get statistical analysis for a subject and metric."""
        values = [
            getattr(result, metric)
            for result in self.get_results_by_subject(subject)
            if result.success and hasattr(result, metric)
        ]
        if not values:
            return {}

        return {
            "min": min(values),
            "max": max(values),
            "mean": statistics.mean(values),
            "median": statistics.median(values),
            "stdev": statistics.stdev(values) if len(values) > 1 else 0.0,
            "count": len(values),
        }

    def generate_report(self) -> Dict[str, Any]:
        """Generate benchmark report grouped by subject and test case."""
        subjects = sorted(set(r.subject for r in self.results))
        report: Dict[str, Any] = {
            "suite_name": self.suite_name,
            "timestamp": self.timestamp,
            "total_results": len(self.results),
            "summary": {},
            "detailed_results": {},
        }

        for subject in subjects:
            subject_results = self.get_results_by_subject(subject)
            successful = [r for r in subject_results if r.success]
            report["summary"][subject] = {
                "total_runs": len(subject_results),
                "successful_runs": len(successful),
                "throughput": self.get_statistics(subject, "operations_per_second"),
                "memory": self.get_statistics(subject, "memory_used_mb"),
            }

        for result in self.results:
            report["detailed_results"][result.test_case] = {
                "subject": result.subject,
                "processing_time_ms": result.processing_time_ms,
                "memory_used_mb": result.memory_used_mb,
                "operations_per_second": result.operations_per_second,
                "success": result.success,
                "error": result.error_message,
            }

        return report


def _generate_balanced(size: int) -> List[str]:
    lines = ['<?xml version="1.0" encoding="UTF-8"?>', "<catalog>"]
    for i in range(size):
        lines.extend([
            "  <item>",
            f"    <title>Item {i}</title>",
            "    <flags><new/><featured/></flags>",
            "  </item>",
        ])
    lines.append("</catalog>")
    return lines


def _generate_nested(size: int) -> List[str]:
    opening = [f"<level{i}>" for i in range(size)]
    closing = [f"</level{i}>" for i in reversed(range(size))]
    return opening + closing


def _generate_mismatched(size: int) -> List[str]:
    lines = ["<root>"]
    for i in range(size):
        lines.append(f"<open{i}><inner>")
        lines.append(f"</open{i}>")
        if i % 3 == 0:
            lines.append(f"</stray{i}>")
    return lines


class MatcherBenchmark:
    """Benchmark for the matcher and the containers it is built on."""

    def __init__(
        self,
        correlation_id: Optional[str] = None,
        document_size: int = 1000,
        warmup_runs: int = 1,
        benchmark_runs: int = 5
    ) -> None:
        """Initialize benchmark.

        Args:
            correlation_id: Optional correlation ID for tracking
            document_size: Scale of the synthetic documents and container workloads
            warmup_runs: Number of warmup runs before benchmarking
            benchmark_runs: Number of benchmark runs to average
        """
        if document_size <= 0:
            raise ValueError("document_size must be > 0")
        if benchmark_runs <= 0:
            raise ValueError("benchmark_runs must be > 0")
        if warmup_runs < 0:
            raise ValueError("warmup_runs must be >= 0")

        self.correlation_id = correlation_id
        self.document_size = document_size
        self.warmup_runs = warmup_runs
        self.benchmark_runs = benchmark_runs
        self.logger = get_logger(__name__, correlation_id, "benchmark")
        self.matcher = TagMatcher(correlation_id=correlation_id)

        self.documents: Dict[str, List[str]] = {
            "balanced_document": _generate_balanced(document_size),
            "deeply_nested_document": _generate_nested(document_size),
            "mismatched_document": _generate_mismatched(document_size),
        }
        self.container_workloads: Dict[str, Callable[[], int]] = {
            "sequence_append_growth": self._sequence_append_growth,
            "linked_head_tail_churn": self._linked_head_tail_churn,
            "stack_push_pop": self._stack_push_pop,
            "queue_enqueue_dequeue": self._queue_enqueue_dequeue,
        }

    def _measure_memory_usage(self) -> float:
        """Get current memory usage in MB."""
        process = psutil.Process()
        return process.memory_info().rss / BYTES_PER_MB

    def _sequence_append_growth(self) -> int:
        sequence: ArraySequence[int] = ArraySequence()
        for i in range(self.document_size):
            sequence.add(i)
        return self.document_size

    def _linked_head_tail_churn(self) -> int:
        linked: LinkedSequence[int] = LinkedSequence()
        for i in range(self.document_size):
            linked.add_first(i)
            linked.add(i)
        while not linked.is_empty():
            linked.remove_first()
            linked.remove_last()
        return self.document_size * 4

    def _stack_push_pop(self) -> int:
        stack: Stack[int] = Stack()
        for i in range(self.document_size):
            stack.push(i)
        while not stack.is_empty():
            stack.pop()
        return self.document_size * 2

    def _queue_enqueue_dequeue(self) -> int:
        queue: Queue[int] = Queue()
        for i in range(self.document_size):
            queue.enqueue(i)
        while not queue.is_empty():
            queue.dequeue()
        return self.document_size * 2

    def _timed(self, subject: str, test_case: str, run: Callable[[], int]) -> BenchmarkResult:
        gc.collect()
        memory_before = self._measure_memory_usage()
        start_time = time.time()

        try:
            operations = run()
            success = True
            error_message = None
        except Exception as e:
            self.logger.exception("Benchmark run failed", extra={"test_case": test_case})
            operations = 0
            success = False
            error_message = str(e)

        processing_time = (time.time() - start_time) * MS_PER_SECOND
        memory_used = max(0.0, self._measure_memory_usage() - memory_before)

        return BenchmarkResult(
            subject=subject,
            test_case=test_case,
            processing_time_ms=processing_time,
            memory_used_mb=memory_used,
            operations=operations,
            success=success,
            error_message=error_message,
        )

    def _benchmark_document(self, test_case: str, lines: List[str]) -> BenchmarkResult:
        def run() -> int:
            report = self.matcher.check_lines(lines, source=test_case)
            return report.metrics.lines_processed

        return self._timed(MATCHER_SUBJECT, test_case, run)

    def _average(self, runs: List[BenchmarkResult]) -> BenchmarkResult:
        successful = [r for r in runs if r.success]
        if not successful:
            return runs[0]
        return BenchmarkResult(
            subject=successful[0].subject,
            test_case=successful[0].test_case,
            processing_time_ms=statistics.mean([r.processing_time_ms for r in successful]),
            memory_used_mb=statistics.mean([r.memory_used_mb for r in successful]),
            operations=successful[0].operations,
            success=True,
        )

    def run_benchmark(self, include_containers: bool = True) -> BenchmarkSuite:
        """Run the benchmark suite.

        Args:
            include_containers: Whether to time the raw container workloads too

        Returns:
            BenchmarkSuite with one averaged result per test case
        """
        suite = BenchmarkSuite()
        self.logger.info(
            "Starting benchmark suite",
            extra={
                "document_size": self.document_size,
                "warmup_runs": self.warmup_runs,
                "benchmark_runs": self.benchmark_runs,
            },
        )

        cases: List[Callable[[], BenchmarkResult]] = [
            (lambda name=name, lines=lines: self._benchmark_document(name, lines))
            for name, lines in self.documents.items()
        ]
        if include_containers:
            cases.extend(
                (lambda name=name, workload=workload:
                    self._timed(CONTAINER_SUBJECT, name, workload))
                for name, workload in self.container_workloads.items()
            )

        for case in cases:
            for _ in range(self.warmup_runs):
                case()
            suite.add_result(self._average([case() for _ in range(self.benchmark_runs)]))

        self.logger.info(
            "Benchmark suite completed",
            extra={"total_results": len(suite.results)},
        )
        return suite
