"""Test fixtures and utilities."""

import pytest
from pathlib import Path

from configguard.core.emitter import FindingEmitter
from configguard.core.sinks import MemorySink
from configguard.parsing.extraction import config_calls
from configguard.parsing.parser import parse


CONFIG_EXS = '''import Config

config :my_app,
  ecto_repos: [MyApp.Repo]

config :my_app, MyAppWeb.Endpoint,
  url: [host: "localhost"],
  render_errors: [formats: [html: MyAppWeb.ErrorHTML], layout: false],
  pubsub_server: MyApp.PubSub,
  live_view: [signing_salt: "Qx1fUq9c"],
  secret_key_base: "config-secret-key-base"

config :my_app, MyApp.Mailer, adapter: Swoosh.Adapters.Local

config :phoenix, :json_library, Jason

import_config "#{config_env()}.exs"
'''

DEV_EXS = '''import Config

config :my_app, MyApp.Repo,
  username: "postgres",
  password: "postgres",
  hostname: "localhost",
  show_sensitive_data_on_connection_error: true,
  pool_size: 10

config :my_app, MyAppWeb.Endpoint,
  http: [ip: {127, 0, 0, 1}, port: 4000],
  check_origin: false,
  code_reloader: true,
  debug_errors: true,
  secret_key_base: "dev-secret-key-base",
  watchers: [
    esbuild: {Esbuild, :install_and_run, [:default, ~w(--sourcemap=inline --watch)]}
  ]

config :logger, :console, format: "[$level] $message\\n"
'''

PROD_EXS = '''import Config

config :my_app, MyAppWeb.Endpoint,
  cache_static_manifest: "priv/static/cache_manifest.json"

config :my_app, MyAppWeb.Endpoint,
  secret_key_base:
    "prod-secret-key-base"

config :my_app, MyApp.Repo,
  username: "admin",
  db_password: "hunter2",
  api_secret: "${API_SECRET}",
  ssl: true

config :logger, level: :info
'''

RUNTIME_EXS = '''import Config

if config_env() == :prod do
  database_url =
    System.get_env("DATABASE_URL") ||
      raise """
      environment variable DATABASE_URL is missing.
      """

  config :my_app, MyApp.Repo,
    url: database_url,
    pool_size: String.to_integer(System.get_env("POOL_SIZE") || "10")

  config :my_app, MyAppWeb.Endpoint,
    http: [ip: {0, 0, 0, 0, 0, 0, 0, 0}, port: 4000],
    secret_key_base: "${SECRET_KEY_BASE}"
end
'''


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O beyond tmp_path")


@pytest.fixture
def phoenix_project(tmp_path):
    """Create a Phoenix-style project with the usual configuration files."""
    project = tmp_path / "my_app"
    config_dir = project / "config"
    config_dir.mkdir(parents=True)
    (config_dir / "config.exs").write_text(CONFIG_EXS)
    (config_dir / "dev.exs").write_text(DEV_EXS)
    (config_dir / "prod.exs").write_text(PROD_EXS)
    (config_dir / "runtime.exs").write_text(RUNTIME_EXS)
    return project


@pytest.fixture
def write_config(tmp_path):
    """Write a configuration file into tmp_path and return its path."""

    def _write(content: str, name: str = "prod.exs") -> Path:
        path = tmp_path / name
        path.write_text(content)
        return path

    return _write


@pytest.fixture
def config_call():
    """Parse source and return its first ``config`` call node."""

    def _first(source: str = 'config :my_app, MyAppWeb.Endpoint, secret_key_base: "abc"\n'):
        return config_calls(parse(source))[0]

    return _first


@pytest.fixture
def memory_sink():
    """In-memory finding sink."""
    return MemorySink()


@pytest.fixture
def emitter(memory_sink):
    """Emitter writing to the in-memory sink."""
    return FindingEmitter(memory_sink)
