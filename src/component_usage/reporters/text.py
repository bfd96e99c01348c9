"""Plain text usage report generator."""

from datetime import datetime, timezone
from pathlib import Path

from component_usage.models import ScanResult

RULE = "=" * 42
SECTION_RULE = "-" * 42


class TextReporter:
    """Generates the component usage text report."""

    def __init__(self, target_module: str, merged: bool = False) -> None:
        """Initialize text reporter.

        Args:
            target_module: Module the report is about
            merged: If True, list markup and call usages in one section
        """
        self.target_module = target_module
        self.merged = merged

    def generate_report(
        self,
        result: ScanResult,
        output_file: Path,
        generated_at: datetime | None = None,
    ) -> str:
        """Render the report and write it to a file in one go.

        Args:
            result: Completed scan result
            output_file: Path to output file (overwritten)
            generated_at: Timestamp for the header (defaults to now)

        Returns:
            Report text
        """
        report = self.render(result, generated_at)
        output_file.write_text(report, encoding="utf-8")
        return report

    def render(self, result: ScanResult, generated_at: datetime | None = None) -> str:
        """Render the report text.

        Args:
            result: Completed scan result
            generated_at: Timestamp for the header (defaults to now)

        Returns:
            Report text
        """
        if generated_at is None:
            generated_at = datetime.now(timezone.utc)

        lines: list[str] = [
            f'Component Usage Report for "{self.target_module}" package',
            f"Generated on: {generated_at.isoformat()}",
            RULE,
            "",
        ]

        lines.extend(self._summary_section(result))
        lines.extend(self._imports_section(result))

        if self.merged:
            lines.extend(self._usage_section(
                "COMPONENT INSTANCES",
                result.merged_instances(),
                "Used {count} time(s) in:",
                None,
            ))
            lines.extend(self._unused_section("COMPONENTS WITH NO INSTANCES FOUND", result))
        else:
            lines.extend(self._usage_section(
                "JSX COMPONENT USAGE (<Component />)",
                result.markup_instances,
                "Used as JSX {count} time(s) in:",
                "No JSX usage found.",
            ))
            lines.extend(self._usage_section(
                "FUNCTION CALL USAGE (Component())",
                result.call_instances,
                "Called as function {count} time(s) in:",
                "No function call usage found.",
            ))
            lines.extend(self._unused_section("COMPONENTS WITH NO USAGE FOUND", result))

        return "\n".join(lines) + "\n"

    def _summary_section(self, result: ScanResult) -> list[str]:
        lines = [
            "SUMMARY",
            SECTION_RULE,
            f"Total imported components: {len(result.imports)}",
            f"Total component instances: {result.total_instances}",
        ]

        if not self.merged:
            lines.append(f"  - JSX usage (<Component/>): {result.total_markup}")
            lines.append(f"  - Function calls (Component()): {result.total_calls}")

        lines.append("")
        return lines

    def _imports_section(self, result: ScanResult) -> list[str]:
        lines = ["IMPORTED COMPONENTS", SECTION_RULE]

        for symbol in sorted(result.imports):
            files = sorted(result.imports[symbol])
            lines.append(f"{symbol}:")
            lines.append(f"  Imported in {len(files)} file(s):")
            lines.extend(f"    - {file_path}" for file_path in files)
            lines.append("")

        return lines

    def _usage_section(
        self,
        title: str,
        instances: dict[str, list[str]],
        count_line: str,
        empty_message: str | None,
    ) -> list[str]:
        """Render one usage table, most used keys first."""
        lines = [title, SECTION_RULE]

        if not instances and empty_message:
            lines.append(empty_message)
            lines.append("")
            return lines

        ordered = sorted(instances, key=lambda key: (-len(instances[key]), key))

        for key in ordered:
            occurrences = instances[key]
            lines.append(f"{key}:")
            lines.append("  " + count_line.format(count=len(occurrences)))

            for file_path, count in ScanResult.file_counts(occurrences).items():
                lines.append(f"    - {file_path} ({count} instance(s))")

            lines.append("")

        return lines

    def _unused_section(self, title: str, result: ScanResult) -> list[str]:
        lines = [title, SECTION_RULE]
        unused = result.unused_symbols()

        if unused:
            lines.extend(unused)
        else:
            lines.append("All imported components are used.")

        lines.append("")
        return lines
