"""
Gravity-Ion Thermoelectric Report - Table Utilities
Formats calculation results for the console and for markdown reports.
"""

import math
import logging

logger = logging.getLogger(__name__)


def format_value(value, unit=''):
    """Format a numerical value with magnitude-dependent precision.

    Precision by magnitude: |v| >= 1e6 and |v| < 1e-3 in exponent form
    (3 significant figures), otherwise 1, 3 or 4 decimals for the hundreds,
    units and thousandths ranges. Booleans print as Yes/No; zero, inf and
    nan print unchanged. None prints as n/a. Strings pass through.

    Args:
        value: Result value (float, int, bool, str or None)
        unit: Unit suffix, omitted when empty

    Returns:
        str
    """
    if isinstance(value, str):
        return value
    if value is None:
        text = "n/a"
    elif isinstance(value, bool):
        text = "Yes" if value else "No"
    elif value == 0 or not math.isfinite(value):
        text = str(value)
    else:
        magnitude = abs(value)
        if magnitude >= 1e6 or magnitude < 1e-3:
            text = f"{value:.3e}"
        elif magnitude >= 100:
            text = f"{value:.1f}"
        elif magnitude >= 1:
            text = f"{value:.3f}"
        else:
            text = f"{value:.4f}"
    return f"{text} {unit}" if unit else text


def format_display_value(value, unit=''):
    """Format a value for a results panel (two decimals, grouped thousands).

      0             -> '0.00'
      0 < v < 0.01  -> exponential with 2 decimals
      >= 1000       -> thousands separators, 2 decimals
      otherwise     -> 2 decimals

    Args:
        value: Number or string
        unit: Optional unit suffix

    Returns:
        str
    """
    if isinstance(value, str):
        text = value
    elif value == 0:
        text = '0.00'
    elif 0 < value < 0.01:
        text = f"{value:.2e}"
    elif value >= 1000:
        text = f"{value:,.2f}"
    else:
        text = f"{value:.2f}"
    return f"{text} {unit}" if unit else text


def markdown_table(title, rows, headers=None):
    """Generate a markdown table string.

    Args:
        title: Table title (rendered as ### heading)
        rows: List of row sequences. Float values are auto-formatted;
              all others are converted via str().
        headers: Column header list (default: Parameter | Value | Unit)

    Returns:
        str: Complete markdown table including title heading
    """
    if headers is None:
        headers = ['Parameter', 'Value', 'Unit']

    lines = [f"\n### {title}\n"]
    lines.append('| ' + ' | '.join(headers) + ' |')
    lines.append('|' + '|'.join(['---'] * len(headers)) + '|')

    for row in rows:
        cells = [format_value(item) if isinstance(item, float) else str(item) for item in row]
        cells += [''] * (len(headers) - len(cells))
        lines.append('| ' + ' | '.join(cells) + ' |')

    return '\n'.join(lines)


def results_to_markdown(results_dict, filename, title="Gravity-Ion Thermoelectric Calculation Results"):
    """Save a nested results dictionary to a markdown file.

    Top-level keys become ## section headings. A section is either a
    dict of name -> (value, unit) rendered as a table, or a string
    rendered verbatim.

    Args:
        results_dict: Dict mapping section title -> params (dict or str)
        filename: Output file path
        title: Document heading
    """
    lines = [f"# {title}\n"]

    for section, params in results_dict.items():
        lines.append(f"\n## {section}\n")
        if isinstance(params, str):
            lines.append(params)
            continue
        # bare values get an empty unit column
        rows = [[key, *(val if isinstance(val, tuple) else (val, ''))]
                for key, val in params.items()]
        lines.append(markdown_table(section, [[k, format_value(v), u] for k, v, u in rows]))

    with open(filename, 'w', encoding='utf-8') as f:
        f.write('\n'.join(lines) + '\n')
    logger.info("Results saved: %s", filename)
