"""
FastAPI Dashboard Module

Copyright (c) 2025 Alexandru Emanuel Vasile. All rights reserved.
Proprietary Software - 200-Key Limited Release License

This module provides a small local web dashboard for the File Organiser.
The dashboard includes:
- A form to organize a folder (with the backup toggle)
- A button to open the file map in the default editor
- Read access to the loaded rules and the backup/dry-run settings

NOTICE: This software is proprietary and confidential.
See LICENSE.txt for full terms and conditions.

Author: Alexandru Emanuel Vasile
License: Proprietary (200-key limited release)
"""

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse
from pydantic import BaseModel
from typing import Dict, Any, Optional

from ..config import Config, get_config
from ..core.errors import ConfigError
from ..organiser import FileOrganiser, expand_path


# Pydantic models for API requests
class OrganizeRequest(BaseModel):
    path: str
    make_backup: Optional[bool] = None
    dry_run: Optional[bool] = None


class SettingsUpdateRequest(BaseModel):
    enable_backup: Optional[bool] = None
    dry_run: Optional[bool] = None


# Initialize FastAPI app
app = FastAPI(
    title="File Organiser Dashboard",
    description="Web dashboard for File Organiser",
    version="1.0.0"
)


class AppState:
    """Application state container."""

    def __init__(self, config: Optional[Config] = None):
        self.config = config if config is not None else get_config()
        self.organiser = FileOrganiser(self.config)


_state: Optional[AppState] = None


def get_state() -> AppState:
    """Create the application state on first use."""
    global _state
    if _state is None:
        _state = AppState()
    return _state


def set_state(state: AppState) -> None:
    """Replace the application state (used to point at another config)."""
    global _state
    _state = state


def get_dashboard_html() -> str:
    """Return the dashboard page."""
    return """
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <title>File Organiser</title>
    <style>
        body { font-family: sans-serif; max-width: 640px; margin: 40px auto; color: #222; }
        input[type=text] { width: 100%; padding: 8px; box-sizing: border-box; }
        button { margin-top: 12px; padding: 8px 16px; }
        #result { margin-top: 16px; font-weight: bold; }
        .error { color: #b00020; }
        .success { color: #1b5e20; }
    </style>
</head>
<body>
    <h1>File Organiser</h1>
    <input type="text" id="path" placeholder="Enter folder to organize...">
    <label><input type="checkbox" id="backup" checked> Create backup first</label>
    <div>
        <button onclick="organize()">Organize files</button>
        <button onclick="openConfig()">Open config file</button>
    </div>
    <div id="result"></div>
    <script>
        function show(message) {
            const el = document.getElementById('result');
            el.textContent = message;
            el.className = message.startsWith('Error:') ? 'error' : 'success';
        }
        async function organize() {
            const path = document.getElementById('path').value;
            if (!path) { return; }
            const response = await fetch('/api/organize', {
                method: 'POST',
                headers: {'Content-Type': 'application/json'},
                body: JSON.stringify({path: path, make_backup: document.getElementById('backup').checked})
            });
            const data = await response.json();
            show(data.message);
            document.getElementById('path').value = '';
        }
        async function openConfig() {
            const response = await fetch('/api/config/open', {method: 'POST'});
            const data = await response.json();
            show(data.message);
        }
        fetch('/api/settings').then(r => r.json()).then(s => {
            document.getElementById('backup').checked = s.enable_backup;
        });
    </script>
</body>
</html>
"""


# ==================== API Endpoints ====================

@app.get("/", response_class=HTMLResponse)
def dashboard():
    """Serve dashboard HTML."""
    return get_dashboard_html()


@app.post("/api/organize")
def organize(request: OrganizeRequest) -> Dict[str, Any]:
    """Organize a folder and return the report."""
    state = get_state()
    report = state.organiser.organize(
        expand_path(request.path),
        make_backup=request.make_backup,
        dry_run=request.dry_run
    )
    return report.to_dict()


@app.post("/api/config/open")
def open_config() -> Dict[str, Any]:
    """Open the file map in the default editor."""
    message = get_state().organiser.open_config_file()
    return {'success': not message.startswith("Error:"), 'message': message}


@app.get("/api/rules")
def get_rules() -> Dict[str, Any]:
    """Get the current file map."""
    try:
        rule_table = get_state().organiser.load_rules()
    except ConfigError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return rule_table.to_dict()


@app.get("/api/settings")
def get_settings() -> Dict[str, Any]:
    """Get backup and dry-run settings."""
    config = get_state().config
    return {
        'enable_backup': config.enable_backup,
        'dry_run': config.dry_run,
        'file_map_path': str(config.file_map_path)
    }


@app.post("/api/settings")
def update_settings(request: SettingsUpdateRequest) -> Dict[str, Any]:
    """Update settings."""
    config = get_state().config

    if request.enable_backup is not None:
        config.update('enable_backup', request.enable_backup)

    if request.dry_run is not None:
        config.update('dry_run', request.dry_run)

    config.save()

    return {'success': True, 'message': 'Settings updated'}


def run_dashboard(host: str = "127.0.0.1", port: int = 5000):
    """
    Run the dashboard server.

    Args:
        host (str): Host to bind to
        port (int): Port to listen on
    """
    import uvicorn

    print(f"""
    ============================================
    File Organiser - Dashboard
    ============================================

    Dashboard: http://{host}:{port}

    Press Ctrl+C to stop
    ============================================
    """)

    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    run_dashboard()
