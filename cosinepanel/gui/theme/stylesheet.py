"""QSS template shared by the bundled themes."""


def build_stylesheet(c: dict) -> str:
    """Build the QSS stylesheet from a colors dict."""
    return f"""
/* Window */
QMainWindow {{
    background-color: {c['bg_window']};
}}

QWidget {{
    background-color: {c['bg_window']};
    color: {c['text_primary']};
    font-size: 11px;
}}

/* Field labels */
QLabel#fieldLabel {{
    background-color: transparent;
    font-weight: bold;
}}

/* Rescale hint under the plot */
QLabel#hintLabel {{
    background-color: transparent;
    color: {c['hint']};
}}

/* Numeric entries */
QLineEdit {{
    background-color: {c['bg_entry']};
    border: 1px solid {c['border_default']};
    border-radius: 2px;
    padding: 1px 3px;
    color: {c['text_entry']};
    selection-background-color: {c['accent_primary']};
    selection-color: {c['bg_entry']};
}}

QLineEdit:focus {{
    border-color: {c['accent_primary']};
}}

QLineEdit[invalid="true"] {{
    border: 1px solid {c['error']};
}}

/* Status Bar */
QStatusBar {{
    background-color: {c['bg_window']};
    border-top: 1px solid {c['border_default']};
    color: {c['text_secondary']};
}}

/* Tooltip */
QToolTip {{
    background-color: {c['bg_entry']};
    border: 1px solid {c['accent_primary']};
    color: {c['text_entry']};
    padding: 4px 8px;
}}
"""
