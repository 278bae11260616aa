"""Stats report command."""

from collections.abc import Iterator

from .._output_schemas.stats import StatsReportOutput
from ..config.StatsConfig import StatsConfig
from ..database.Database import Database
from ..database.DatabaseConnectionError import DatabaseConnectionError
from ..StageResult import StageResult
from .aggregate_stats import aggregate_stats
from .ScanError import ScanError


def cmd_report(config: StatsConfig) -> StageResult:
    """Scan the transaction collections and build the health report.

    Returns:
        StageResult whose output carries the serialized report, or no report and
        the error when connecting or any scan failed
    """

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        scan = config.scan
        yield (0.1, f"Connecting to {config.database.type} database {config.database.name}...")
        try:
            with Database(config.database, retry_attempts=scan.retry_attempts) as database:
                yield (
                    0.3,
                    f"Connected to {database.address}; scanning collections (up to {scan.concurrency} at once)...",
                )
                report = aggregate_stats(
                    database,
                    concurrency=scan.concurrency,
                    batch_size=scan.batch_size,
                    txns_collection=scan.txns_collection,
                )
        except (DatabaseConnectionError, ScanError) as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = StatsReportOutput(
                errors=[str(e)],
                warnings=[],
                database=config.database.name,
                report=None,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = (
            f"Scanned {report.in_progress.total_txns} transaction(s); "
            f"{len(report.collections)} collection(s) with queued transactions"
        )
        result_obj.output = StatsReportOutput(
            errors=[],
            warnings=[],
            database=config.database.name,
            report=report.to_dict(),
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Gathering transaction stats for {config.database.name}...",
        progress_callback=do_work,
    )
