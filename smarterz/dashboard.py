# Single-page dashboard served at "/". Plain HTML, inline CSS/JS, no build step.

PLAYER_URL = "https://smarterz.netlify.app/player?url="

DASHBOARD_HTML = r"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>Smarterz | Server</title>
    <link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;600;700&display=swap" rel="stylesheet">
    <style>
        :root { --p: #8b5cf6; --bg: #09090b; --s: #18181b; --b: #27272a; --t: #fafafa; --tm: #a1a1aa; }
        body { font-family: 'Inter', sans-serif; background: var(--bg); color: var(--t); margin: 0; line-height: 1.5; }
        header { position: sticky; top: 0; background: rgba(9,9,11,0.9); backdrop-filter: blur(8px); padding: 15px 5%; border-bottom: 1px solid var(--b); display: flex; justify-content: space-between; align-items: center; z-index: 10; }
        .logo { font-weight: 700; font-size: 1.2rem; cursor: pointer; color: var(--p); }
        .toggle-box { display: flex; align-items: center; gap: 8px; font-size: 0.85rem; color: var(--tm); }
        main { padding: 20px 5%; max-width: 900px; margin: 0 auto; }
        .grid { display: grid; grid-template-columns: repeat(auto-fill, minmax(250px, 1fr)); gap: 15px; }
        .card { background: var(--s); border: 1px solid var(--b); border-radius: 12px; padding: 15px; cursor: pointer; transition: 0.2s; }
        .card:hover { border-color: var(--p); transform: translateY(-2px); }
        .tabs { display: flex; gap: 20px; border-bottom: 1px solid var(--b); margin-bottom: 20px; }
        .tab { padding: 10px 5px; cursor: pointer; color: var(--tm); border-bottom: 2px solid transparent; }
        .tab.active { color: var(--t); border-bottom-color: var(--p); }
        .group { background: var(--s); border-radius: 10px; margin-bottom: 10px; overflow: hidden; border: 1px solid var(--b); }
        .group-h { padding: 12px 15px; background: rgba(255,255,255,0.03); cursor: pointer; font-weight: 600; display: flex; justify-content: space-between; }
        .item { padding: 10px 15px; border-top: 1px solid var(--b); display: flex; justify-content: space-between; align-items: center; font-size: 0.9rem; }
        .item-type { font-size: 0.8rem; color: var(--tm); text-transform: uppercase; }
        .btn { padding: 6px 12px; border-radius: 6px; border: none; font-weight: 600; cursor: pointer; font-size: 0.75rem; }
        .btn-done { background: var(--p); color: #fff; }
        .btn-undo { background: #3f3f46; color: #d4d4d8; }
        .hidden { display: none !important; }
        .loading { text-align: center; padding: 50px; color: var(--tm); }
        .error { text-align: center; padding: 50px; color: #f87171; }
    </style>
</head>
<body>
    <header>
        <div class="logo" onclick="location.reload()">SMARTERZ</div>
        <div class="toggle-box">
            Auto-Copy <input type="checkbox" id="copyToggle" checked>
        </div>
    </header>

    <main id="app">
        <div class="loading">Initializing...</div>
    </main>

    <script>
        const PLAYER_URL = '__PLAYER_URL__';
        let state = { completed: [], allData: [], currentBatch: '' };

        function showError(msg) {
            document.getElementById('app').innerHTML = `<div class="error">${msg}</div>`;
        }

        async function getJson(url, options) {
            const r = await fetch(url, options);
            const json = await r.json();
            if (!r.ok) throw new Error(json.error || 'Request failed');
            return json;
        }

        async function init() {
            const toggle = document.getElementById('copyToggle');
            const copySaved = localStorage.getItem('copyToggle');
            if (copySaved !== null) toggle.checked = copySaved === 'true';
            toggle.onchange = (e) => localStorage.setItem('copyToggle', e.target.checked);

            try {
                state.completed = await getJson('/api/progress');
                await showBatches();
            } catch (e) {
                showError(e.message);
            }
        }

        async function showBatches() {
            const app = document.getElementById('app');
            app.innerHTML = '<div class="loading">Fetching Batches...</div>';
            const json = await getJson('/api/batches');

            let html = '<div class="grid">';
            (json.data || []).forEach(b => {
                html += `<div class="card" onclick="loadBatch('${b.id}', '${String(b.name).replace(/'/g, "")}')">
                    <div style="font-weight:600">${b.name}</div>
                </div>`;
            });
            app.innerHTML = html + '</div>';
        }

        async function loadBatch(id, name) {
            state.currentBatch = name;
            const app = document.getElementById('app');
            app.innerHTML = `<div class="loading">Loading all content for ${name}...<br><small>This may take a few seconds.</small></div>`;
            try {
                const json = await getJson('/api/batch-full/' + encodeURIComponent(id));
                state.allData = json.data;
                renderDashboard();
            } catch (e) {
                showError(e.message);
            }
        }

        function renderDashboard() {
            const pending = state.allData.filter(i => !state.completed.includes(i.id));
            const done = state.allData.filter(i => state.completed.includes(i.id));

            document.getElementById('app').innerHTML = `
                <h2 style="margin-bottom:5px">${state.currentBatch}</h2>
                <div class="tabs">
                    <div class="tab active" id="tabP" onclick="switchTab('P')">Pending (${pending.length})</div>
                    <div class="tab" id="tabD" onclick="switchTab('D')">Completed (${done.length})</div>
                </div>
                <div id="viewP">${renderList(pending, false)}</div>
                <div id="viewD" class="hidden">${renderList(done, true)}</div>
            `;
        }

        function renderList(items, isDone) {
            if (items.length === 0) return '<div class="loading">Nothing here.</div>';
            const groups = {};
            items.forEach(i => {
                if (!groups[i._subjectName]) groups[i._subjectName] = [];
                groups[i._subjectName].push(i);
            });

            return Object.keys(groups).map(sub => `
                <div class="group">
                    <div class="group-h" onclick="this.nextElementSibling.classList.toggle('hidden')">
                        ${sub} <span>${groups[sub].length}</span>
                    </div>
                    <div>
                        ${groups[sub].map(i => `
                            <div class="item">
                                <div>
                                    <div class="item-type">${i._type}</div>
                                    ${i.title || i.name}
                                </div>
                                ${isDone
                                    ? `<button class="btn btn-undo" onclick="markUndone('${i.id}')">Undo</button>`
                                    : `<button class="btn btn-done" onclick="markDone('${i.id}', \`${String(i.title || i.name).replace(/'/g, "")}\`, '${i.url || i.originalUrl}')">Done</button>`
                                }
                            </div>
                        `).join('')}
                    </div>
                </div>
            `).join('');
        }

        function switchTab(type) {
            document.getElementById('viewP').classList.toggle('hidden', type === 'D');
            document.getElementById('viewD').classList.toggle('hidden', type === 'P');
            document.getElementById('tabP').classList.toggle('active', type === 'P');
            document.getElementById('tabD').classList.toggle('active', type === 'D');
        }

        function shareUrl(url) {
            if (url && url.includes('.m3u8')) return PLAYER_URL + encodeURIComponent(url);
            return url;
        }

        async function postMark(route, id) {
            await getJson(route, {
                method: 'POST',
                headers: { 'Content-Type': 'application/json' },
                body: JSON.stringify({ id })
            });
        }

        async function markDone(id, title, url) {
            if (document.getElementById('copyToggle').checked) {
                navigator.clipboard.writeText(title + ': ' + shareUrl(url));
            }
            try {
                await postMark('/api/mark-done', id);
            } catch (e) {
                showError(e.message);
                return;
            }
            if (!state.completed.includes(id)) state.completed.push(id);
            renderDashboard();
        }

        async function markUndone(id) {
            try {
                await postMark('/api/mark-undone', id);
            } catch (e) {
                showError(e.message);
                return;
            }
            state.completed = state.completed.filter(x => x !== id);
            renderDashboard();
        }

        init();
    </script>
</body>
</html>
""".replace("__PLAYER_URL__", PLAYER_URL)
