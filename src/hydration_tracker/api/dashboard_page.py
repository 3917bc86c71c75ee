"""Static HTML shell for the dashboard."""

DASHBOARD_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>AquaTrack</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem;
             background: #0f172a; color: #e2e8f0; }
      .card { max-width: 420px; margin: 0 auto; text-align: center; }
      .ring-bg { stroke: #1e293b; }
      .ring-fg { stroke: #38bdf8; transition: stroke-dashoffset 0.4s; }
      button { padding: 0.5rem 1rem; margin: 0.25rem; border-radius: 8px; }
      .entry { display: flex; justify-content: space-between; padding: 0.3rem 0; }
      .pending { opacity: 0.5; }
      #toast { min-height: 1.5rem; color: #38bdf8; }
      .confetti { animation: pop 0.6s ease-in-out 3; }
      @keyframes pop { 50% { transform: scale(1.05); } }
      .badge { display: inline-block; padding: 0.2rem 0.6rem; border-radius: 999px;
               background: #f59e0b; color: #0f172a; font-weight: 600; }
    </style>
  </head>
  <body>
    <div class="card" id="card">
      <h1>AquaTrack</h1>
      <svg width="260" height="260" viewBox="0 0 260 260">
        <circle class="ring-bg" cx="130" cy="130" r="120" fill="none"
                stroke-width="14" />
        <circle id="ring" class="ring-fg" cx="130" cy="130" r="120" fill="none"
                stroke-width="14" transform="rotate(-90 130 130)" />
        <text id="total" x="130" y="130" text-anchor="middle" fill="#e2e8f0"
              font-size="32"></text>
        <text id="goal" x="130" y="160" text-anchor="middle" fill="#94a3b8"></text>
      </svg>
      <p id="motivation"></p>
      <p><span id="badge" class="badge" hidden>&#128293; Goal met</span></p>
      <div id="buttons"></div>
      <p>
        <input id="goal-input" type="number" min="1" />
        <button onclick="setGoal()">Set goal</button>
        <button onclick="send('POST', '/api/reset')">Reset day</button>
      </p>
      <p id="toast"></p>
      <div id="entries"></div>
    </div>
    <script>
      function render(view) {
        const ring = document.getElementById('ring');
        ring.setAttribute('stroke-dasharray', view.ring.circumference);
        ring.setAttribute('stroke-dashoffset', view.ring.dash_offset);
        document.getElementById('total').textContent = view.total_ml + 'ml';
        document.getElementById('goal').textContent =
          view.percentage + '% of ' + view.goal_ml + 'ml';
        document.getElementById('motivation').textContent = view.motivation;
        document.getElementById('toast').textContent = view.toast || '';
        document.getElementById('badge').hidden = !view.show_streak_badge;
        document.getElementById('card').classList.toggle('confetti', view.celebrating);
        const buttons = document.getElementById('buttons');
        buttons.innerHTML = '';
        view.quick_add_amounts.forEach((amount) => {
          const button = document.createElement('button');
          button.textContent = '+ ' + amount + 'ml';
          button.onclick = () => send('POST', '/api/logs', { amount_ml: amount });
          buttons.appendChild(button);
        });
        const entries = document.getElementById('entries');
        entries.innerHTML = '';
        if (view.empty_message) {
          entries.textContent = view.empty_message;
        }
        view.entries.forEach((entry) => {
          const row = document.createElement('div');
          row.className = 'entry' + (entry.pending ? ' pending' : '');
          row.innerHTML = '<span>' + entry.amount_ml + 'ml</span><span>' +
            entry.time_label + '</span>';
          const remove = document.createElement('button');
          remove.textContent = '\\u00d7';
          remove.onclick = () => send('DELETE', '/api/logs/' + entry.id);
          row.appendChild(remove);
          entries.appendChild(row);
        });
      }
      async function send(method, path, body) {
        const res = await fetch(path, {
          method: method,
          headers: { 'Content-Type': 'application/json' },
          body: body ? JSON.stringify(body) : undefined,
        });
        if (res.ok) { render(await res.json()); }
      }
      function setGoal() {
        send('PUT', '/api/goal', { value: document.getElementById('goal-input').value });
      }
      async function poll() {
        const res = await fetch('/api/dashboard');
        if (res.ok) { render(await res.json()); }
      }
      send('POST', '/api/refresh').then(() => setInterval(poll, 1000));
    </script>
  </body>
</html>
"""
