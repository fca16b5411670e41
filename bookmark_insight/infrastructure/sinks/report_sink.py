import json
from pathlib import Path

from bookmark_insight.application.contracts import IngestReportRecord
from bookmark_insight.application.ports import ReportSinkPort
from bookmark_insight.config.logger_config import logger


class JsonReportSink(ReportSinkPort):
    def __init__(self, report_path: str) -> None:
        self.report_path = Path(report_path)

    def write_report(self, report: IngestReportRecord) -> None:
        self.report_path.parent.mkdir(parents=True, exist_ok=True)
        self.report_path.write_text(
            json.dumps(report.to_dict(), ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        logger.info("Ingest report written: report_path={}", str(self.report_path))
