#!/usr/bin/env python3
"""
Example: Basic usage of complex-lint as a Python library
"""

from pathlib import Path

from complex_lint import ComplexityAnalyzer, analyze
from complex_lint.config import StateSpaceWeights, load_config

here = Path(__file__).parent

# Analyze a file with the default weights
result = analyze(here / "example.go")
for report in result.reports:
    print(
        f"{report.name}: in={report.input_state_space} out={report.output_state_space} "
        f"branches={report.branching_factor} ops={report.operational_complexity}"
    )

# Longer sequences weigh more
config = load_config(weights=StateSpaceWeights(sequence_length=1000))
result = ComplexityAnalyzer(config).analyze_file(here / "example.go")
print()
print("With sequence_length=1000:")
for report in result.reports:
    print(f"  {report.name}: in={report.input_state_space}")
