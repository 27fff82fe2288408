from __future__ import annotations

import argparse
import sys
from pathlib import Path

from config import ExportOptions, load_config_file, settings
from core.logging.context import context
from core.logging.logger import get_logger
from domain.exceptions import FaceitExportError
from infrastructure import CsvRecordSink, FaceitAPIClient
from application.use_cases import ExportLeagueUseCase, ExportSummary
from .options import add_export_arguments, cli_values


class ExportCommand:
    """Exports standings, teams, matches and statistics of one division to CSV."""

    name = "export"
    help = "Export a championship division to CSV files"

    def __init__(self, args: argparse.Namespace) -> None:
        self._args = args
        self._log = get_logger(__name__, service="export-cli")

    @staticmethod
    def add_arguments(parser: argparse.ArgumentParser) -> None:
        add_export_arguments(parser)

    def _options(self) -> ExportOptions:
        file_cfg = load_config_file(self._args.config or settings.CONFIG_FILE)
        options = ExportOptions.resolve(cli=cli_values(self._args), file_cfg=file_cfg)
        options.validate()
        return options

    def _print_summary(self, options: ExportOptions, summary: ExportSummary) -> None:
        print("Done.")
        print(f"  Organizer: {options.org_id or options.org_name}")
        print(f"  Championship: {summary.championship_name} ({summary.championship_id})")
        print(f"  Leaderboard: {summary.leaderboard_label} (group {summary.group_index})")
        print(f"  Teams: {summary.team_count}")
        print(f"  Matches: {summary.match_count}")
        if summary.my_team_id:
            print(f"  My team: {summary.my_team_id}")
        if summary.skipped:
            print(f"  Skipped fetches: {summary.skipped}")
        print(f"  CSVs in ./{options.out_dir}")

    async def run(self) -> int:
        try:
            settings.validate()
            options = self._options()
            self._log.info(lambda: f"start org={options.org_id or options.org_name} champ={options.champ_id or options.champ_name}")
            sink = CsvRecordSink(Path(options.out_dir), clean=options.clean_out)
            with context(command=self.name):
                async with FaceitAPIClient(settings.FACEIT_API_KEY) as api:
                    summary = await ExportLeagueUseCase(api, sink).execute(options)
        except FaceitExportError as e:
            self._log.error(lambda: f"export failed: {e}")
            print(e.user_message, file=sys.stderr)
            return 1
        self._print_summary(options, summary)
        return 0
