"""
Shared HTML layout and styling helpers.
"""
from fastapi.responses import HTMLResponse

from core.render import escape

NAV_LINKS = [
    ("/", "🏠 Home"),
    ("/jobs", "💼 Jobs"),
    ("/results", "📊 Results"),
    ("/admit-cards", "🎫 Admit Cards"),
    ("/answer-keys", "🔑 Answer Keys"),
]


def render_page(title: str, body: str, active: str = "", status_code: int = 200) -> HTMLResponse:
    """
    Shared layout: dark background, nav bar and footer around `body`.
    `body` is trusted markup; `title` is escaped here.
    """
    links = []
    for href, label in NAV_LINKS:
        css = ' class="active"' if href == active else ""
        links.append(f'<a href="{href}"{css}>{label}</a>')
    nav = "\n".join(links)

    html = f"""
    <!DOCTYPE html>
    <html lang="en">
      <head>
        <meta charset="utf-8" />
        <meta name="viewport" content="width=device-width, initial-scale=1" />
        <title>{escape(title)} | SarkariJob</title>
        <style>
          :root {{
            color-scheme: dark;
          }}
          * {{
            box-sizing: border-box;
          }}
          body {{
            font-family: system-ui, -apple-system, BlinkMacSystemFont, "Segoe UI", sans-serif;
            margin: 0;
            padding: 0;
            background: #020617;
            color: #e5e7eb;
          }}
          .page {{
            max-width: 960px;
            margin: 0 auto;
            padding: 1.5rem 1rem 3rem;
          }}
          header {{
            display: flex;
            justify-content: space-between;
            align-items: center;
            flex-wrap: wrap;
            gap: 0.75rem;
            margin-bottom: 1.5rem;
            padding: 0.75rem 1rem;
            background: linear-gradient(90deg, rgba(56,189,248,0.08), rgba(34,197,94,0.08));
            border: 1px solid #1f2937;
            border-radius: 0.75rem;
          }}
          header h1 {{
            font-size: 1.4rem;
            margin: 0;
          }}
          nav {{
            display: flex;
            gap: 0.6rem;
            flex-wrap: wrap;
          }}
          nav a {{
            text-decoration: none;
            color: #e5e7eb;
            font-size: 0.95rem;
            padding: 6px 10px;
            border-radius: 8px;
            background: rgba(255,255,255,0.04);
            border: 1px solid transparent;
          }}
          nav a:hover, nav a.active {{
            color: #38bdf8;
            border-color: #1f2937;
          }}
          a {{
            color: #38bdf8;
          }}
          .job-card, .result-item, .category-card {{
            background: #020617;
            border-radius: 0.75rem;
            border: 1px solid #1f2937;
            padding: 1rem 1.25rem;
            margin-bottom: 1rem;
            box-shadow: 0 10px 30px rgba(15, 23, 42, 0.5);
          }}
          .job-title, .result-title {{
            font-size: 1.1rem;
            margin: 0 0 0.25rem;
          }}
          .job-department, .result-exam, .result-date {{
            color: #9ca3af;
            font-size: 0.9rem;
          }}
          .job-details {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(200px, 1fr));
            gap: 0.4rem;
            margin: 0.75rem 0;
          }}
          .job-tag {{
            display: inline-block;
            font-size: 0.75rem;
            padding: 2px 8px;
            margin-right: 0.4rem;
            border-radius: 999px;
            background: rgba(56,189,248,0.12);
          }}
          .job-actions, .result-actions {{
            display: flex;
            gap: 0.6rem;
            align-items: center;
            margin-top: 0.75rem;
          }}
          .apply-btn, .download-btn {{
            padding: 0.5rem 1rem;
            border-radius: 0.5rem;
            background: #22c55e;
            color: #022c22;
            font-weight: 600;
            text-decoration: none;
          }}
          .bookmark-btn, .share-btn {{
            border: 1px solid #1f2937;
            background: transparent;
            border-radius: 0.5rem;
            padding: 0.4rem 0.6rem;
            cursor: pointer;
          }}
          .categories {{
            display: grid;
            grid-template-columns: repeat(auto-fit, minmax(140px, 1fr));
            gap: 0.75rem;
          }}
          .category-card .count {{
            font-size: 1.2rem;
            font-weight: 600;
          }}
          .no-data, .muted {{
            color: #9ca3af;
          }}
          .error {{
            color: #f87171;
          }}
          form.search {{
            display: flex;
            gap: 0.5rem;
            margin-bottom: 1rem;
          }}
          form.search input, form.search select {{
            padding: 0.5rem;
            border-radius: 0.375rem;
            border: 1px solid #4b5563;
            background: #020617;
            color: #e5e7eb;
          }}
          footer {{
            margin-top: 2.5rem;
            padding: 1.5rem 0;
            border-top: 1px solid #1f2937;
            font-size: 0.95rem;
            text-align: center;
            background: linear-gradient(90deg, rgba(56,189,248,0.08), rgba(34,197,94,0.08));
            border-radius: 0.75rem;
          }}
        </style>
      </head>
      <body>
        <div class="page">
          <header>
            <h1>SarkariJob</h1>
            <nav>
              {nav}
            </nav>
          </header>
          <main>
            {body}
          </main>
          <footer>
            <div><strong>(c) 2025 SarkariJob.</strong> Latest government jobs, results and admit cards.</div>
          </footer>
        </div>
      </body>
    </html>
    """
    return HTMLResponse(content=html, status_code=status_code)
