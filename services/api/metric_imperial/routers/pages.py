"""
Landing page with a small form that calls /api/convert.
"""

from html import escape

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ..services.unit_conversion import UNIT_PAIRS, IMPERIAL_FACTORS, spell_out
from ..settings import settings

router = APIRouter()

EXAMPLE_INPUTS = ["4gal", "1/2km", "5.4/3lbs", "kg"]

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
    <title>{title}</title>
    <style>
        body {{ font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }}
        .example {{ background: #f9f9f9; padding: 20px; margin: 15px 0; border-left: 4px solid #667eea; }}
        code {{ background: #f1f1f1; padding: 4px 8px; font-family: monospace; }}
        #result {{ margin-top: 15px; padding: 15px; background: #f8f9fa; display: none; }}
    </style>
</head>
<body>
    <h1>{title}</h1>
    <p>Convert between gallons/liters, miles/kilometers, and pounds/kilograms</p>

    <div class="example">
        <input type="text" id="inputValue" placeholder="Enter value like: 4gal, 1/2km, 5.4lbs">
        <button onclick="testConvert()">Convert</button>
        <div id="result"></div>
    </div>

    <div class="example">
        <strong>API Usage:</strong><br>
        Use endpoint: <code>GET /api/convert?input=4gal</code>
    </div>

    <div class="example">
        <strong>Examples:</strong><br>
        {examples}
    </div>

    <div class="example">
        <strong>Supported units:</strong><br>
        {pairs}
    </div>

    <script>
        async function testConvert() {{
            const input = document.getElementById('inputValue').value;
            const resultDiv = document.getElementById('result');
            const response = await fetch('/api/convert?input=' + encodeURIComponent(input));
            const data = await response.json();
            if (data.error) {{
                resultDiv.textContent = 'Error: ' + data.error;
            }} else {{
                resultDiv.textContent = data.string;
            }}
            resultDiv.style.display = 'block';
        }}
        document.getElementById('inputValue').addEventListener('keypress', function(e) {{
            if (e.key === 'Enter') {{
                testConvert();
            }}
        }});
    </script>
</body>
</html>
"""


def render_index() -> str:
    examples = "<br>\n        ".join(
        f"<code>/api/convert?input={escape(example)}</code>" for example in EXAMPLE_INPUTS
    )
    pairs = "<br>\n        ".join(
        f"{imperial.value} ({spell_out(imperial)}) &harr; "
        f"{UNIT_PAIRS[imperial].value} ({spell_out(UNIT_PAIRS[imperial])})"
        for imperial in IMPERIAL_FACTORS
    )
    return PAGE_TEMPLATE.format(title=escape(settings.app_title), examples=examples, pairs=pairs)


@router.get("/", response_class=HTMLResponse)
def index():
    return render_index()
