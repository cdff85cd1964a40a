"""
Demo Page Route

Serves a single HTML page with an EventSource client for trying the search
endpoint from a browser. It is mounted at ``/`` outside the API base path
and can be disabled with ``ENABLE_DEMO_PAGE=false``.
"""

from fastapi import APIRouter
from fastapi.responses import HTMLResponse

from ai_search.application.api.dependencies import SettingsDep

router = APIRouter(tags=["Demo"])

_SEARCH_URL_PLACEHOLDER = "__SEARCH_URL__"

DEMO_PAGE = """<!DOCTYPE html>
<html>
<head>
    <title>AI Search API Demo</title>
    <style>
        body { font-family: Arial, sans-serif; max-width: 800px; margin: 0 auto; padding: 20px; }
        #response { white-space: pre-wrap; background: #f0f0f0; padding: 10px; border-radius: 5px; min-height: 100px; }
        input[type="text"] { width: 70%; padding: 8px; }
        button { padding: 8px 15px; background: #0078d4; color: white; border: none; cursor: pointer; }
        .loading { color: #666; font-style: italic; }
    </style>
</head>
<body>
    <h1>AI Search API Demo</h1>
    <div>
        <input type="text" id="queryInput" placeholder="Enter your search query...">
        <button onclick="performSearch()">Search</button>
    </div>
    <div>
        <h3>Try these examples:</h3>
        <ul>
            <li><a href="#" onclick="setQuery('dotnet')">dotnet</a> (cached response)</li>
            <li><a href="#" onclick="setQuery('sse')">sse</a> (cached response)</li>
            <li><a href="#" onclick="setQuery('What can you tell me about AI search?')">What can you tell me about AI search?</a> (streaming response)</li>
            <li><a href="#" onclick="setQuery('My password is 12345')">My password is 12345</a> (unsuitable query)</li>
            <li><a href="#" onclick="setQuery('Look up record with id 00000000-0000-0000-0000-000000000000')">Look up record with id 00000000-0000-0000-0000-000000000000</a> (unsuitable query - GUID)</li>
        </ul>
    </div>
    <h2>Response:</h2>
    <div id="response">Enter a query and click Search to see results...</div>

    <script>
        let eventSource = null;

        function setQuery(query) {
            document.getElementById('queryInput').value = query;
            return false;
        }

        function performSearch() {
            const query = document.getElementById('queryInput').value.trim();

            if (!query) return;

            if (eventSource) {
                eventSource.close();
            }

            const responseElement = document.getElementById('response');
            responseElement.textContent = 'Loading...';
            responseElement.classList.add('loading');

            eventSource = new EventSource(`__SEARCH_URL__?q=${encodeURIComponent(query)}`);

            let fullResponse = '';

            eventSource.onmessage = function(event) {
                responseElement.classList.remove('loading');
                const data = JSON.parse(event.data);

                if (data.status === 'no_ai') {
                    responseElement.textContent = `Query not suitable for AI: ${data.message}`;
                }
                else if (data.status === 'cached') {
                    responseElement.textContent = `Cached response: ${data.ai_response}\\n\\nSources: ${data.sources.join(', ')}`;
                }
                else if (data.status === 'stream') {
                    fullResponse += data.content;
                    responseElement.textContent = fullResponse;
                }
                else if (data.status === 'error') {
                    responseElement.textContent = `Error: ${data.message}`;
                }
            };

            eventSource.addEventListener('done', function(event) {
                eventSource.close();
            });

            eventSource.onerror = function(event) {
                responseElement.textContent = 'Error: Connection to server failed.';
                eventSource.close();
            };
        }
    </script>
</body>
</html>
"""


def render_demo_page(base_path: str) -> str:
    """Fill in the search endpoint URL for the configured base path."""
    return DEMO_PAGE.replace(_SEARCH_URL_PLACEHOLDER, f"{base_path}/ai-search")


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def demo_page(settings: SettingsDep) -> HTMLResponse:
    return HTMLResponse(render_demo_page(settings.app.API_BASE_PATH))
