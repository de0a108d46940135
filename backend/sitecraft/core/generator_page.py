"""
Server-rendered generator page.

One self-contained HTML document with:
- Template gallery (sets the ``template`` field only)
- Website name / sections / color preferences / content style inputs
- Submit → ``POST {api}/generate`` → ``POST {api}/preview`` → sandboxed iframe
- Copy HTML / Copy CSS actions and an Export stub
- Toast notifications for success and failure
"""

from __future__ import annotations

import html as html_mod
import json

from sitecraft.schemas.generation import (
    COLOR_PREFERENCES_MIN_LENGTH,
    DEFAULT_TEMPLATE_ID,
    SECTIONS_MIN_LENGTH,
    VALIDATION_MESSAGES,
    WEBSITE_NAME_MIN_LENGTH,
)
from sitecraft.schemas.templates import TemplateOption

CONTENT_STYLES = (
    ("professional", "Professional"),
    ("casual", "Casual"),
    ("techy", "Techy"),
    ("playful", "Playful"),
)

FORM_DEFAULTS = {
    "websiteName": "",
    "sections": "Hero, Features, About Us, Contact Form",
    "colorPreferences": "Futuristic purple and black theme with cyan accents",
    "contentStyle": "techy",
    "template": DEFAULT_TEMPLATE_ID,
}


def _e(text: str | None) -> str:
    """HTML-escape helper."""
    return html_mod.escape(text or "")


def _js(value) -> str:
    """JSON for embedding inside a <script> block."""
    return json.dumps(value).replace("</", "<\\/")


def _render_template_card(template: TemplateOption, selected: bool) -> str:
    selected_class = " selected" if selected else ""
    return f"""
        <button type="button" class="template-card{selected_class}" data-template-id="{_e(template.id)}">
          <img src="{_e(template.image_url)}" alt="{_e(template.name)}" data-ai-hint="{_e(template.image_hint)}">
          <span class="template-name">{_e(template.name)}</span>
        </button>"""


def _render_style_options(selected: str) -> str:
    options = []
    for value, label in CONTENT_STYLES:
        attr = " selected" if value == selected else ""
        options.append(f'<option value="{value}"{attr}>{label}</option>')
    return "".join(options)


def render_generator_page(
    templates: list[TemplateOption],
    api_prefix: str,
    title: str,
) -> str:
    """Render the full generator page; *title* heads the page and the browser tab.

    Parameters
    ----------
    templates:
        Gallery entries, in display order.
    api_prefix:
        Mount point of the v1 API, e.g. ``"/api/v1"``.
    """
    defaults = FORM_DEFAULTS
    cards = "".join(
        _render_template_card(t, t.id == defaults["template"]) for t in templates
    )
    min_lengths = {
        "websiteName": WEBSITE_NAME_MIN_LENGTH,
        "sections": SECTIONS_MIN_LENGTH,
        "colorPreferences": COLOR_PREFERENCES_MIN_LENGTH,
    }

    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>{_e(title)}</title>
<style>
* {{ box-sizing: border-box; margin: 0; padding: 0; }}
body {{
  font-family: 'Inter', system-ui, sans-serif;
  background: radial-gradient(circle at top left, #2e1065, #09090b 60%);
  color: #e4e4e7;
  min-height: 100vh;
}}
.layout {{
  display: grid;
  grid-template-columns: 1fr;
  gap: 1rem;
  padding: 1rem;
  min-height: calc(100vh - 2rem);
}}
@media (min-width: 1024px) {{ .layout {{ grid-template-columns: 1fr 1fr; }} }}
.panel {{
  background: rgba(24, 24, 27, 0.3);
  backdrop-filter: blur(16px);
  border: 1px solid rgba(168, 85, 247, 0.2);
  border-radius: 0.75rem;
  padding: 1.5rem;
  display: flex;
  flex-direction: column;
  gap: 1.5rem;
}}
.panel-header {{ display: flex; align-items: center; justify-content: space-between; gap: 1rem; }}
.panel-title {{ font-size: 1.5rem; font-weight: 700; }}
.panel-sub {{ color: #a1a1aa; font-size: 0.9rem; }}
.label {{ font-weight: 600; margin-bottom: 0.5rem; display: block; }}
.gallery {{ display: flex; gap: 0.75rem; overflow-x: auto; padding-bottom: 0.5rem; }}
.template-card {{
  position: relative;
  flex: 0 0 calc(50% - 0.375rem);
  aspect-ratio: 3 / 2;
  border: 2px solid transparent;
  border-radius: 0.5rem;
  overflow: hidden;
  cursor: pointer;
  background: #18181b;
  transition: border-color 0.2s, box-shadow 0.2s;
}}
.template-card:hover {{ border-color: rgba(168, 85, 247, 0.5); }}
.template-card.selected {{ border-color: #a855f7; box-shadow: 0 0 15px -2px #a855f7; }}
.template-card img {{ width: 100%; height: 100%; object-fit: cover; }}
.template-name {{
  position: absolute; inset: auto 0 0 0;
  padding: 0.75rem 1rem;
  background: linear-gradient(transparent, rgba(0, 0, 0, 0.7));
  color: #fff; font-weight: 700; text-align: left;
}}
.fields {{ display: flex; flex-direction: column; gap: 1rem; }}
.row {{ display: grid; grid-template-columns: 1fr 1fr; gap: 1rem; }}
input, textarea, select {{
  width: 100%;
  padding: 0.6rem 0.75rem;
  border-radius: 0.5rem;
  border: 1px solid #3f3f46;
  background: #09090b;
  color: inherit;
  font: inherit;
}}
textarea {{ min-height: 5rem; resize: vertical; }}
.hint {{ color: #a1a1aa; font-size: 0.8rem; margin-top: 0.25rem; }}
.field-error {{ color: #f87171; font-size: 0.8rem; margin-top: 0.25rem; min-height: 1em; }}
.submit {{
  width: 100%;
  padding: 0.9rem;
  border: none;
  border-radius: 9999px;
  background: #a855f7;
  color: #fff;
  font-size: 1.1rem;
  font-weight: 700;
  cursor: pointer;
  box-shadow: 0 0 15px #a855f7, 0 0 5px #a855f7;
  transition: transform 0.3s, box-shadow 0.3s;
}}
.submit:hover {{ transform: scale(1.03); box-shadow: 0 0 30px #a855f7, 0 0 10px #a855f7; }}
.submit:disabled {{ opacity: 0.6; cursor: wait; transform: none; }}
.actions {{ display: none; gap: 0.5rem; }}
.actions.visible {{ display: flex; }}
.actions button {{
  padding: 0.4rem 0.8rem;
  border-radius: 0.375rem;
  border: 1px solid #3f3f46;
  background: transparent;
  color: inherit;
  cursor: pointer;
}}
.preview {{
  flex-grow: 1;
  min-height: 480px;
  background: #09090b;
  border: 1px solid #27272a;
  border-radius: 0.375rem;
  display: flex;
  align-items: center;
  justify-content: center;
  text-align: center;
}}
.preview iframe {{ width: 100%; height: 100%; min-height: 480px; border: 0; border-radius: 0.375rem; background: #fff; }}
.placeholder h3 {{ font-size: 1.5rem; margin-bottom: 0.5rem; }}
.placeholder p {{ color: #a1a1aa; max-width: 20rem; margin: 0 auto; }}
.loading {{ color: #a855f7; font-size: 1.5rem; animation: pulse 1.5s ease-in-out infinite; }}
@keyframes pulse {{ 50% {{ opacity: 0.4; }} }}
.toasts {{ position: fixed; right: 1rem; bottom: 1rem; display: flex; flex-direction: column; gap: 0.5rem; z-index: 50; }}
.toast {{
  min-width: 16rem; max-width: 24rem;
  padding: 0.75rem 1rem;
  border-radius: 0.5rem;
  background: #18181b;
  border: 1px solid #3f3f46;
}}
.toast.destructive {{ background: #7f1d1d; border-color: #b91c1c; }}
.toast-title {{ font-weight: 700; }}
</style>
</head>
<body>
<div class="layout">

  <!-- Controls -->
  <section class="panel">
    <div>
      <h1 class="panel-title">{_e(title)}</h1>
      <p class="panel-sub">Describe your vision and let AI build it.</p>
    </div>

    <form id="generator-form" novalidate>
      <div class="fields">
        <div>
          <span class="label">1. Choose a Template</span>
          <input type="hidden" name="template" value="{_e(defaults['template'])}">
          <div class="gallery">{cards}
          </div>
        </div>

        <div>
          <span class="label">2. Customize Your Site</span>
          <div class="fields">
            <div>
              <input name="websiteName" placeholder="e.g., Nova Solutions" value="{_e(defaults['websiteName'])}">
              <div class="field-error" data-error-for="websiteName"></div>
            </div>
            <div>
              <textarea name="sections" placeholder="Describe the sections of your website...">{_e(defaults['sections'])}</textarea>
              <div class="hint">List the pages or sections you want.</div>
              <div class="field-error" data-error-for="sections"></div>
            </div>
            <div class="row">
              <div>
                <input name="colorPreferences" placeholder="e.g., Dark, neon blue" value="{_e(defaults['colorPreferences'])}">
                <div class="field-error" data-error-for="colorPreferences"></div>
              </div>
              <div>
                <select name="contentStyle">{_render_style_options(defaults['contentStyle'])}</select>
                <div class="field-error" data-error-for="contentStyle"></div>
              </div>
            </div>
          </div>
        </div>

        <button type="submit" class="submit" id="submit">Generate Website</button>
      </div>
    </form>
  </section>

  <!-- Preview -->
  <section class="panel">
    <div class="panel-header">
      <div>
        <h2 class="panel-title">Live Preview</h2>
        <p class="panel-sub">Your generated website will appear here.</p>
      </div>
      <div class="actions" id="actions">
        <button type="button" data-copy="html">Copy HTML</button>
        <button type="button" data-copy="css">Copy CSS</button>
        <button type="button" id="export">Export</button>
      </div>
    </div>
    <div class="preview" id="preview">
      <div class="placeholder">
        <h3>Your Future Website Awaits</h3>
        <p>Fill out the form to generate your AI-powered website. The preview will appear here.</p>
      </div>
    </div>
  </section>
</div>

<div class="toasts" id="toasts"></div>

<script>
(function() {{
  const API = {_js(api_prefix)};
  const MIN_LENGTHS = {_js(min_lengths)};
  const MESSAGES = {_js(VALIDATION_MESSAGES)};
  const GENERIC_ERROR = 'An unknown error occurred.';

  const form = document.getElementById('generator-form');
  const submit = document.getElementById('submit');
  const preview = document.getElementById('preview');
  const actions = document.getElementById('actions');
  const toasts = document.getElementById('toasts');
  const placeholder = preview.innerHTML;
  let generated = null;

  function toast(title, description, variant) {{
    const el = document.createElement('div');
    el.className = 'toast' + (variant === 'destructive' ? ' destructive' : '');
    const t = document.createElement('div');
    t.className = 'toast-title';
    t.textContent = title;
    const d = document.createElement('div');
    d.textContent = description;
    el.appendChild(t);
    el.appendChild(d);
    toasts.appendChild(el);
    setTimeout(function() {{ el.remove(); }}, 5000);
  }}

  // Template gallery
  document.querySelectorAll('.template-card').forEach(function(card) {{
    card.addEventListener('click', function() {{
      document.querySelectorAll('.template-card').forEach(function(c) {{ c.classList.remove('selected'); }});
      card.classList.add('selected');
      form.elements.template.value = card.dataset.templateId;
    }});
  }});

  function showErrors(errors) {{
    document.querySelectorAll('[data-error-for]').forEach(function(el) {{
      el.textContent = errors[el.dataset.errorFor] || '';
    }});
  }}

  function collect() {{
    return {{
      websiteName: form.elements.websiteName.value,
      sections: form.elements.sections.value,
      colorPreferences: form.elements.colorPreferences.value,
      contentStyle: form.elements.contentStyle.value,
      template: form.elements.template.value || null,
    }};
  }}

  function validate(values) {{
    const errors = {{}};
    Object.keys(MIN_LENGTHS).forEach(function(name) {{
      if (values[name].length < MIN_LENGTHS[name]) errors[name] = MESSAGES[name];
    }});
    return errors;
  }}

  function serverErrors(detail) {{
    const errors = {{}};
    if (Array.isArray(detail)) {{
      detail.forEach(function(item) {{
        const name = item.loc && item.loc[item.loc.length - 1];
        if (name) errors[name] = MESSAGES[name] || item.msg;
      }});
    }}
    return errors;
  }}

  function setLoading(loading) {{
    submit.disabled = loading;
    submit.textContent = loading ? 'Generating...' : 'Generate Website';
    if (loading) {{
      actions.classList.remove('visible');
      preview.innerHTML = '<p class="loading">Generating your universe...</p>';
    }}
  }}

  function showPreview(doc) {{
    const frame = document.createElement('iframe');
    frame.title = 'Website Preview';
    frame.setAttribute('sandbox', 'allow-scripts');
    frame.srcdoc = doc;
    preview.innerHTML = '';
    preview.appendChild(frame);
    actions.classList.add('visible');
  }}

  async function postJSON(path, body) {{
    return fetch(API + path, {{
      method: 'POST',
      headers: {{ 'Content-Type': 'application/json' }},
      body: JSON.stringify(body),
    }});
  }}

  form.addEventListener('submit', async function(e) {{
    e.preventDefault();
    const values = collect();
    const errors = validate(values);
    showErrors(errors);
    if (Object.keys(errors).length) return;

    setLoading(true);
    generated = null;
    try {{
      const res = await postJSON('/generate', values);
      const body = await res.json().catch(function() {{ return {{}}; }});
      if (!res.ok) {{
        if (res.status === 422) showErrors(serverErrors(body.detail));
        throw new Error(typeof body.detail === 'string' ? body.detail : GENERIC_ERROR);
      }}
      if (!body.html || !body.css) throw new Error('AI failed to return complete code.');

      const doc = await postJSON('/preview', body);
      if (!doc.ok) throw new Error(GENERIC_ERROR);
      generated = body;
      showPreview(await doc.text());
      toast('Website Generated!', 'Your website is ready to be previewed.');
    }} catch (err) {{
      preview.innerHTML = placeholder;
      toast('Generation Failed', err && err.message ? err.message : GENERIC_ERROR, 'destructive');
    }} finally {{
      setLoading(false);
    }}
  }});

  // Copy actions
  async function copy(text, successMessage) {{
    if (!navigator.clipboard) {{
      toast('Error', 'Clipboard API not available in this browser.', 'destructive');
      return false;
    }}
    try {{
      await navigator.clipboard.writeText(text);
      toast('Copied to clipboard!', successMessage || 'Content has been copied successfully.');
      return true;
    }} catch (err) {{
      console.warn('Copy failed', err);
      toast('Copy Failed', 'Could not copy content to clipboard.', 'destructive');
      return false;
    }}
  }}

  document.querySelectorAll('[data-copy]').forEach(function(btn) {{
    btn.addEventListener('click', function() {{
      if (!generated) return;
      const kind = btn.dataset.copy;
      copy(generated[kind], kind.toUpperCase() + ' code copied.');
    }});
  }});

  document.getElementById('export').addEventListener('click', function() {{
    toast('Coming Soon!', 'Zip download is not yet implemented.');
  }});
}})();
</script>
</body>
</html>"""
