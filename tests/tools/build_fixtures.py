#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
build_fixtures – create / refresh the sample Rails application used by the
viewfinder test-suite.

Idempotent and 100 % Python. Usage: build_fixtures.py [ROOT]
"""
from __future__ import annotations

import json
import shutil
import sys
import textwrap
from pathlib import Path

DEFAULT_ROOT = (Path(__file__).resolve().parents[2] / "test-fixtures").resolve()


# ────────────────────────── helpers ──────────────────────────
def _write(path: Path, body: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(textwrap.dedent(body).lstrip(), encoding="utf-8")


# ───────────────────── application skeleton ─────────────────────
def _populate_config(root: Path) -> None:
    _write(root / "config/application.rb", """
        require_relative "boot"
        module Fixture
          class Application < Rails::Application
          end
        end
    """)

    routes = [
        {"name": "user", "path": "/users/:id(.:format)", "controller": "users", "action": "show"},
        {"name": "users", "path": "/users(.:format)", "reqs": "users#index"},
        {"name": "admin_root", "path": "/admin(.:format)", "controller": "admin/dashboard", "action": "index"},
        {"name": "ghost", "path": "", "controller": "users", "action": "show"},
        {"name": "loops", "path": "/loops(.:format)", "controller": "loops", "action": "show"},
    ]
    (root / "config/routes.json").write_text(json.dumps(routes, indent=2), encoding="utf-8")

    _write(root / "config/routes.txt", """
                  Prefix Verb   URI Pattern                Controller#Action
                   users GET    /users(.:format)           users#index
                         POST   /users(.:format)           users#create
                    user GET    /users/:id(.:format)       users#show
              admin_root GET    /admin(.:format)           admin/dashboard#index
        rails_health_check GET  /up(.:format)              rails/health#show
    """)


# ───────────────────── views ─────────────────────
def _populate_views(root: Path) -> None:
    views = root / "app/views"

    _write(views / "users/show.html.erb", """
        <h1>User</h1>
        <%= render "shared/header" %>
        <%= render "details", locals: { user: @user } %>
        <%= render "missing" %>
    """)
    _write(views / "users/_details.html.erb", """
        <div class="details">
        <%= render partial: "users/avatar" %>
        </div>
    """)
    _write(views / "users/_avatar.erb", '<img src="avatar.png">\n')
    _write(views / "users/_header.html.erb", "<p>Users header</p>\n")
    _write(views / "users/relative.html.erb", '<%= render "header" %>\n')
    _write(views / "users/absolute.html.erb", '<%= render "shared/header" %>\n')
    _write(views / "users/rooted.html.erb", '<%= render "/header" %>\n')
    _write(views / "_header.html.erb", "<p>Root header</p>\n")
    _write(views / "users/underscored.html.erb", '<%= render "__header" %>\n')
    _write(views / "users/index.html.erb", """
        <ul>
        <%= render "row" %>
        <%= render "row" %>
        </ul>
    """)
    _write(views / "users/_row.html.erb", "<li>row</li>\n")
    _write(views / "users/multi.html.erb", """
        <%= render partial: "shared/header",
                   locals: { title: "Hi",
                             user: @user } %>
    """)

    _write(views / "shared/_header.html.erb", "<p>Hi</p>\n")
    _write(views / "shared/_header.erb", "<p>lower priority</p>\n")

    _write(views / "loops/show.html.erb", """
        <%= render "a" %>
        <%= render "self" %>
    """)
    _write(views / "loops/_a.html.erb", '<%= render "b" %>\n')
    _write(views / "loops/_b.html.erb", '<%= render "a" %>\n')
    _write(views / "loops/_self.html.erb", '<%= render "self" %>\n')

    _write(views / "admin/dashboard/index.html.erb", """
        <section>
        <%= render "admin/dashboard/stats" %>
        </section>
    """)
    _write(views / "admin/dashboard/_stats.slim", "p stats\n")
    _write(views / "feeds/show.builder", "xml.feed\n")


def build(root: Path = DEFAULT_ROOT) -> Path:
    if root.exists():
        shutil.rmtree(root)
    root.mkdir(parents=True)
    _populate_config(root)
    _populate_views(root)
    return root


if __name__ == "__main__":
    build(Path(sys.argv[1]).resolve() if len(sys.argv) > 1 else DEFAULT_ROOT)
