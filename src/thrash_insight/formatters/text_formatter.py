"""Plain-text formatter: the fixed-column report."""

from typing import List

from ..analysis.models import AnalysisResult
from ..analysis.ranking import shorten
from ..config import AnalysisConfig
from .base import BaseFormatter, visible_reasons


class TextFormatter(BaseFormatter):
    """Render one block per target plus a totals line.

    Block layout::

           123.0 src/foo.c                                   12
               3 if (x == NULL)
                 abc1234 Fix foo (Alice)
    """

    def render(self, result: AnalysisResult, config: AnalysisConfig) -> None:
        print(self.format(result, config))

    def format(self, result: AnalysisResult, config: AnalysisConfig) -> str:
        lines: List[str] = []
        name_col = f"%-{config.name_width}s"

        for target in result.targets[: config.top_targets]:
            lines.append(
                f"%8.1f {name_col} %4d"
                % (target.score, shorten(target.name, config.name_width), len(target.commits))
            )
            for reason in visible_reasons(target, config):
                lines.append("    %4d %s" % (reason.count, reason.line))
            if config.detail:
                for commit in target.commits:
                    lines.append(
                        "         %s %s (%s)" % (commit.short_id, commit.subject, commit.author_name)
                    )
            lines.append("")

        lines.append(
            f"total targets: {result.total_targets}, total commits: {result.total_commits}"
        )
        return "\n".join(lines)
