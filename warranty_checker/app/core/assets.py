"""
Static assets for the lookup form.

``ensure_assets`` writes the stylesheet and the browser script into the
assets directory when they are missing.  It runs at startup and never
overwrites a file that already exists, so administrators can customise
either file in place.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional

from .config import settings


logger = logging.getLogger(__name__)

STYLE_FILENAME = "wcf-style.css"
SCRIPT_FILENAME = "wcf-script.js"

STYLE_SHEET = (
    ".wcf-form{max-width:420px;margin:2rem auto;padding:1.5rem;border:1px solid #e2e8f0;"
    "border-radius:12px;background:#fff;box-shadow:0 10px 25px -15px rgba(15,23,42,.3)}\n"
    ".wcf-field{margin-bottom:1rem}\n"
    ".wcf-field label{display:block;font-weight:600;color:#1f2937;margin-bottom:.25rem}\n"
    ".wcf-field input{width:100%;padding:.65rem .75rem;border:1px solid #cbd5f5;border-radius:8px;font-size:1rem}\n"
    ".wcf-submit{background:#2563eb;color:#fff;border:none;padding:.75rem 1.5rem;border-radius:999px;"
    "font-weight:600;cursor:pointer;transition:background .2s}\n"
    ".wcf-submit:hover{background:#1d4ed8}\n"
    ".wcf-message{margin-top:1rem;font-size:.95rem}\n"
    ".wcf-message.wcf-success{color:#047857}\n"
    ".wcf-message.wcf-error{color:#dc2626}\n"
)

# Reads its configuration from ``window.wcfSettings`` which the page
# wrapper publishes.  Result values are inserted with textContent only.
SCRIPT = """(function () {
  var form = document.getElementById('wcf-warranty-form');
  if (!form) { return; }
  var cfg = window.wcfSettings || {};
  var labels = cfg.labels || {};
  var message = document.getElementById('wcf-message');

  function show(text, cls) {
    message.className = 'wcf-message ' + cls;
    message.textContent = text;
  }

  function line(label, value) {
    var p = document.createElement('p');
    var strong = document.createElement('strong');
    strong.textContent = label + ': ';
    p.appendChild(strong);
    p.appendChild(document.createTextNode(value));
    message.appendChild(p);
  }

  form.addEventListener('submit', function (event) {
    event.preventDefault();
    message.className = 'wcf-message';
    message.textContent = cfg.checkingMessage || '';
    var body = new URLSearchParams();
    body.append('action', 'check_warranty');
    body.append('nonce', form.querySelector('input[name="wcf_nonce"]').value);
    body.append('serial', document.getElementById('wcf-serial').value);
    body.append('contact', document.getElementById('wcf-contact').value);

    fetch(cfg.ajaxUrl, { method: 'POST', body: body, credentials: 'same-origin' })
      .then(function (response) { return response.json(); })
      .then(function (response) {
        if (response.success) {
          var info = response.data;
          message.textContent = '';
          message.className = 'wcf-message wcf-success';
          line(labels.serial || 'Serial', info.serial);
          line(labels.status || 'Status', info.status);
          if (info.purchaseDate) { line(labels.purchaseDate || 'Purchase date', info.purchaseDate); }
          if (info.expirationDate) { line(labels.expirationDate || 'Expiration date', info.expirationDate); }
          if (info.notes) { line(labels.notes || 'Notes', info.notes); }
        } else {
          show((response.data && response.data.message) || cfg.errorMessage, 'wcf-error');
        }
      })
      .catch(function () {
        show(cfg.transportErrorMessage || cfg.errorMessage, 'wcf-error');
      });
  });
})();
"""

ASSETS = {
    STYLE_FILENAME: STYLE_SHEET,
    SCRIPT_FILENAME: SCRIPT,
}


def get_assets_path(assets_dir: Optional[str] = None) -> Path:
    """Resolve the assets directory, relative paths against the project root."""
    directory = assets_dir or settings.assets_dir
    if os.path.isabs(directory):
        return Path(directory)
    return (Path(__file__).resolve().parent.parent.parent.parent / directory).resolve()


def ensure_assets(assets_dir: Optional[str] = None) -> List[Path]:
    """Create missing asset files and return the paths that were written."""
    assets_path = get_assets_path(assets_dir)
    assets_path.mkdir(parents=True, exist_ok=True)

    created: List[Path] = []
    for filename, content in ASSETS.items():
        target = assets_path / filename
        if target.exists():
            continue
        target.write_text(content, encoding="utf-8")
        logger.info("Created asset %s", target)
        created.append(target)
    return created
