"""HTML pages served to the browser.

Every locale uses the same page builders; the text comes from the locale
string table.
"""

from __future__ import annotations

from html import escape
import json

from trivia_app.constants.about import COPYRIGHT_NOTICE
from trivia_app.constants.locale_constants import SELECTABLE_LANGUAGES
from trivia_app.core.locale_strings import get_strings
from trivia_app.core.models import AffiliateLink, DifficultyTier, ResultMessage
from trivia_app.styling import Styles


def _script_json(value: object) -> str:
    # Keep "</script>" inside string data from closing the tag.
    return json.dumps(value, ensure_ascii=False).replace("</", "<\\/")


def _layout(lang: str, title: str, body: str, script: str = "", body_class: str = "") -> str:
    script_tag = f"<script>{script}</script>" if script else ""
    return f"""<!doctype html>
<html lang="{escape(lang)}">
  <head>
    <meta charset="utf-8" />
    <title>{escape(title)}</title>
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <style>{Styles.get_adaptive_page_style()}</style>
  </head>
  <body class="{body_class}">
    <header><h1>{escape(title)}</h1></header>
    <main>
{body}
    </main>
    <footer>{escape(COPYRIGHT_NOTICE)}</footer>
    {script_tag}
  </body>
</html>
"""


def render_language_page() -> str:
    buttons = "\n".join(
        f'        <button class="button" data-lang="{escape(code)}" aria-label="Select {escape(name)}">'
        f'<span class="muted">{escape(name)}</span><br /><strong>{escape(native)}</strong></button>'
        for code, name, native in SELECTABLE_LANGUAGES
    )
    body = f"""      <section class="card">
        <h2>Select Your Language</h2>
        <div class="grid">
{buttons}
        </div>
      </section>"""
    script = """
      document.querySelectorAll('[data-lang]').forEach(button => {
        button.addEventListener('click', async () => {
          const response = await fetch('/api/language', {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ language: button.dataset.lang })
          });
          const payload = await response.json();
          if (response.ok) {
            window.location.href = payload.home_url;
          }
        });
      });
    """
    return _layout("en", get_strings("en").site_title, body, script, body_class="hero")


def render_home_page(lang: str) -> str:
    strings = get_strings(lang)
    body = f"""      <div class="row">
        <a class="button" href="/">{escape(strings.change_language)}</a>
        <a class="button primary" href="/{escape(lang)}/difficulty">{escape(strings.start_here)}</a>
      </div>
      <section class="card hero">
        <h2>{escape(strings.site_title)}</h2>
        <p>{escape(strings.tagline)}</p>
        <a class="button primary" href="/{escape(lang)}/difficulty">{escape(strings.start_quiz)}</a>
      </section>"""
    return _layout(lang, strings.site_title, body)


def render_difficulty_page(lang: str) -> str:
    strings = get_strings(lang)
    cards = []
    for index, tier in enumerate(DifficultyTier):
        text = strings.difficulties[tier]
        cards.append(
            f"""        <div class="card difficulty-{index}">
          <h3>{escape(text.name)}</h3>
          <p>{escape(text.description)}</p>
          <a class="button" href="/{escape(lang)}/quiz/{tier.value}">{escape(strings.start_tier_quiz.format(name=text.name))}</a>
        </div>"""
        )
    body = f"""      <h2>{escape(strings.select_difficulty)}</h2>
      <div class="grid">
{chr(10).join(cards)}
      </div>
      <p><a class="button" href="/{escape(lang)}/home">{escape(strings.back_to_home)}</a></p>"""
    return _layout(lang, strings.site_title, body)


def render_quiz_page(lang: str, difficulty: DifficultyTier) -> str:
    strings = get_strings(lang)
    tier_name = strings.difficulties[difficulty].name
    labels = {
        "questionProgress": strings.question_progress,
        "scoreLabel": strings.score_label,
        "checkAnswer": strings.check_answer,
        "nextQuestion": strings.next_question,
        "finishQuiz": strings.finish_quiz,
        "correct": strings.correct_feedback,
        "incorrect": strings.incorrect_feedback,
        "noQuestions": strings.no_questions,
    }
    body = f"""      <section class="card" id="quiz-card">
        <div class="row">
          <h2 id="progress-label">{escape(strings.loading)}</h2>
          <span class="muted" id="score-label"></span>
        </div>
        <div class="progress"><div class="progress-fill" id="progress-fill" style="width: 0%"></div></div>
        <div id="question-view">
          <div id="question-text"></div>
          <form id="options"></form>
        </div>
        <div id="explanation-view" class="hidden">
          <h3>{escape(strings.explanation_heading)}</h3>
          <p><span id="feedback"></span> <span id="explanation"></span></p>
          <div class="explanation">
            <h4>{escape(strings.answer_breakdown)}</h4>
            <div id="breakdown"></div>
          </div>
        </div>
        <p id="status" class="muted"></p>
        <div class="row">
          <a class="button" id="quit-link" href="/{escape(lang)}/difficulty">{escape(strings.quit_quiz)}</a>
          <button class="button primary" id="action-button" disabled>{escape(strings.check_answer)}</button>
        </div>
      </section>"""
    script = f"""
      const LANG = {_script_json(lang)};
      const DIFFICULTY = {_script_json(difficulty.value)};
      const LABELS = {_script_json(labels)};
      const progressLabel = document.getElementById('progress-label');
      const scoreLabel = document.getElementById('score-label');
      const progressFill = document.getElementById('progress-fill');
      const questionView = document.getElementById('question-view');
      const questionText = document.getElementById('question-text');
      const optionsForm = document.getElementById('options');
      const explanationView = document.getElementById('explanation-view');
      const feedback = document.getElementById('feedback');
      const explanation = document.getElementById('explanation');
      const breakdown = document.getElementById('breakdown');
      const statusEl = document.getElementById('status');
      const actionButton = document.getElementById('action-button');
      const quitLink = document.getElementById('quit-link');
      let state = null;
      let finished = false;

      function format(template, values) {{
        return template.replace(/\\{{(\\w+)\\}}/g, (_, key) => String(values[key] ?? ''));
      }}

      async function callApi(path, method = 'POST', body = undefined) {{
        const response = await fetch(path, {{
          method,
          headers: {{ 'Content-Type': 'application/json' }},
          body: body === undefined ? undefined : JSON.stringify(body)
        }});
        const payload = await response.json().catch(() => ({{}}));
        if (!response.ok) {{
          throw new Error(payload.detail || 'Request failed');
        }}
        return payload;
      }}

      function renderOptions() {{
        optionsForm.innerHTML = '';
        state.options.forEach((option, index) => {{
          const label = document.createElement('label');
          label.className = 'option';
          const input = document.createElement('input');
          input.type = 'radio';
          input.name = 'answer';
          input.id = `option-${{index}}`;
          input.value = option;
          input.checked = state.selected_answer === option;
          input.addEventListener('change', () => selectAnswer(option));
          label.appendChild(input);
          label.appendChild(document.createTextNode(option));
          optionsForm.appendChild(label);
        }});
      }}

      function renderBreakdown() {{
        breakdown.innerHTML = '';
        state.options.forEach(option => {{
          const line = document.createElement('p');
          line.textContent = option;
          if (option === state.correct_answer) {{
            line.className = 'answer-correct';
          }} else if (option === state.selected_answer) {{
            line.className = 'answer-wrong';
          }}
          breakdown.appendChild(line);
        }});
      }}

      function render(payload) {{
        state = payload;
        statusEl.textContent = '';
        if (state.state === 'empty') {{
          progressLabel.textContent = LABELS.noQuestions;
          questionView.classList.add('hidden');
          actionButton.classList.add('hidden');
          return;
        }}
        progressLabel.textContent = format(LABELS.questionProgress, state);
        scoreLabel.textContent = format(LABELS.scoreLabel, state);
        progressFill.style.width = `${{state.progress_percent}}%`;
        if (state.is_answer_checked) {{
          questionView.classList.add('hidden');
          explanationView.classList.remove('hidden');
          feedback.textContent = state.is_correct
            ? LABELS.correct
            : format(LABELS.incorrect, {{ answer: state.correct_answer }});
          explanation.innerHTML = state.explanation_html || '';
          renderBreakdown();
          actionButton.textContent = state.is_last_question ? LABELS.finishQuiz : LABELS.nextQuestion;
          actionButton.disabled = false;
        }} else {{
          explanationView.classList.add('hidden');
          questionView.classList.remove('hidden');
          questionText.innerHTML = state.question_html;
          renderOptions();
          actionButton.textContent = LABELS.checkAnswer;
          actionButton.disabled = !state.selected_answer;
        }}
      }}

      async function selectAnswer(option) {{
        try {{
          render(await callApi('/api/quiz/select', 'POST', {{ option }}));
        }} catch (error) {{
          statusEl.textContent = error.message;
        }}
      }}

      actionButton.addEventListener('click', async () => {{
        actionButton.disabled = true;
        try {{
          if (!state.is_answer_checked) {{
            render(await callApi('/api/quiz/check'));
            return;
          }}
          const payload = await callApi('/api/quiz/next');
          if (payload.state === 'completed') {{
            finished = true;
            window.location.href = payload.result_url;
            return;
          }}
          render(payload);
        }} catch (error) {{
          statusEl.textContent = error.message;
          actionButton.disabled = false;
        }}
      }});

      // Leaving the page ends the quiz; a beacon still arrives while the page unloads.
      function quitQuiz() {{
        if (finished || !state) {{
          return;
        }}
        finished = true;
        const body = new Blob([JSON.stringify({{ quiz_id: state.quiz_id }})], {{ type: 'application/json' }});
        if (!navigator.sendBeacon || !navigator.sendBeacon('/api/quiz/quit', body)) {{
          fetch('/api/quiz/quit', {{ method: 'POST', body, keepalive: true, headers: {{ 'Content-Type': 'application/json' }} }});
        }}
      }}

      quitLink.addEventListener('click', quitQuiz);
      window.addEventListener('pagehide', quitQuiz);

      callApi('/api/quiz/start', 'POST', {{ difficulty: DIFFICULTY, language: LANG }})
        .then(render)
        .catch(error => {{ statusEl.textContent = error.message; }});
    """
    return _layout(lang, f"{strings.site_title} - {tier_name}", body, script)


def render_result_page(
    lang: str,
    score: int,
    total: int,
    message: ResultMessage,
    links: list[AffiliateLink],
) -> str:
    strings = get_strings(lang)
    percent = round(score / total * 100) if total > 0 else 0
    if links:
        cards = "\n".join(
            f"""          <a class="card link-card" href="{escape(link.url)}" target="_blank" rel="noopener noreferrer">
            <img src="{escape(link.image)}" alt="{escape(link.title)}" />
            <h4>{escape(link.title)}</h4>
            <p class="muted">{escape(link.description)}</p>
          </a>"""
            for link in links
        )
    else:
        cards = f'          <p class="muted">{escape(strings.no_recommendations)}</p>'
    share = {
        "title": strings.results_heading,
        "text": strings.share_text.format(score=score, total=total),
        "path": f"/{lang}/home",
        "unsupported": strings.share_unsupported,
    }
    body = f"""      <section class="card">
        <h2>{escape(strings.results_heading)}</h2>
        <div class="progress"><div class="progress-fill" style="width: {percent}%"></div></div>
        <p>{escape(strings.your_score.format(score=score, total=total))}</p>
        <div class="row">
          <button class="button" id="share-button">{escape(strings.share)}</button>
          <a class="button" href="/{escape(lang)}/difficulty">{escape(strings.retake_quiz)}</a>
        </div>
        <div class="result result-{message.tier.value}">
          <p><strong>{escape(message.title)}</strong></p>
          <p>{escape(message.body)}</p>
        </div>
        <h3>{escape(strings.favorite_spots)}</h3>
        <div class="grid">
{cards}
        </div>
        <div class="row">
          <a class="button" href="/{escape(lang)}/difficulty">{escape(strings.choose_another_difficulty)}</a>
          <a class="button primary" href="/{escape(lang)}/home">{escape(strings.back_to_home)}</a>
        </div>
      </section>"""
    script = f"""
      const SHARE = {_script_json(share)};
      document.getElementById('share-button').addEventListener('click', async () => {{
        const shareData = {{ title: SHARE.title, text: SHARE.text, url: window.location.origin + SHARE.path }};
        if (!navigator.share) {{
          alert(SHARE.unsupported);
          return;
        }}
        try {{
          await navigator.share(shareData);
        }} catch (error) {{
          console.error('Error sharing:', error);
        }}
      }});
    """
    return _layout(lang, strings.site_title, body, script)
