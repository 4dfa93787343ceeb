"""Canned manifest returned when project creation is disabled."""

from __future__ import annotations

from typing import Any

FAKE_CRA_PROJECT: dict[str, Any] = {
    "name": "hello-world",
    "version": "0.1.0",
    "private": True,
    "dependencies": {
        "react": "^16.4.0",
        "react-dom": "^16.4.0",
        "react-scripts": "1.1.4",
    },
    "scripts": {
        "start": "react-scripts start",
        "build": "react-scripts build",
        "test": "react-scripts test --env=jsdom",
        "eject": "react-scripts eject",
    },
    "guppy": {
        "id": "hello-world",
        "name": "Hello World",
        "type": "create-react-app",
        "icon": "icon_hello_world",
        "color": "#E3008F",
        "createdAt": 1528389922447,
    },
}
