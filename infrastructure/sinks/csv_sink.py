"""CSV record sink: one ``<table>.csv`` per table in an output directory."""
import csv
import logging
import shutil
from pathlib import Path
from typing import Any, Dict, Mapping, Sequence

from domain.interfaces import IRecordSink

logger = logging.getLogger(__name__)


class CsvRecordSink(IRecordSink):
    """Writes each table as a header row plus one row per record."""

    def __init__(self, output_dir: Path, clean: bool = False):
        self.output_dir = Path(output_dir)
        self.paths: Dict[str, Path] = {}
        if clean and self.output_dir.exists():
            logger.info(f"Cleaning output directory {self.output_dir}")
            shutil.rmtree(self.output_dir)

    def write(self, table: str, records: Sequence[Mapping[str, Any]]) -> None:
        self.output_dir.mkdir(parents=True, exist_ok=True)
        p = self.output_dir / f"{table}.csv"
        rows = list(records)
        with open(p, "w", newline="", encoding="utf-8") as f:
            if rows:
                cols = list(rows[0].keys())
                w = csv.DictWriter(f, fieldnames=cols, extrasaction="ignore")
                w.writeheader()
                for row in rows:
                    w.writerow({k: self._cell(v) for k, v in row.items()})
        self.paths[table] = p
        logger.debug(f"wrote {p} rows={len(rows)}")

    @staticmethod
    def _cell(value: Any) -> Any:
        return "" if value is None else value
