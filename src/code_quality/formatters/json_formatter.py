"""JSON formatter."""

import json
from dataclasses import asdict

from ..analysis import AnalysisResult
from .base import BaseFormatter


class JsonFormatter(BaseFormatter):
    """Render totals, ratios and levels as JSON."""

    def render(self, result: AnalysisResult) -> None:
        print(self.format(result))

    def format(self, result: AnalysisResult) -> str:
        data = {
            "root": result.root,
            "totals": asdict(result.totals),
            "metrics": {
                a.key: {
                    "value": a.value,
                    "ratio": round(a.ratio, 4),
                    "level": a.level.value,
                    "description": a.description,
                }
                for a in result.report.assessments
            },
            "failed_files": list(result.failed_files),
        }
        if self.include_files:
            data["files"] = [asdict(m) for m in sorted(result.files, key=lambda m: m.path)]
        return json.dumps(data, indent=2)
