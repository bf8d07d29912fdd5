"""Unit tests for DashboardApp - class attributes and construction."""

from __future__ import annotations

from textual.app import App

from esdash.app import DashboardApp
from esdash.constants import APP_TITLE
from esdash.controllers.search import SearchClusterClient
from esdash.models.state.app_settings import AppSettings

from conftest import FakeFetchClient


class TestDashboardApp:
    """Test DashboardApp attributes and constructor."""

    def test_inherits_from_textual_app(self) -> None:
        assert issubclass(DashboardApp, App)

    def test_title(self) -> None:
        assert DashboardApp.TITLE == APP_TITLE

    def test_default_client_uses_settings(self) -> None:
        settings = AppSettings(base_url="http://es:9200", request_timeout=1.5)

        app = DashboardApp(settings)

        assert isinstance(app.client, SearchClusterClient)
        assert app.client.base_url == "http://es:9200"
        assert app.client.timeout == 1.5
        assert app.sub_title == "http://es:9200"

    def test_injected_client_is_used(self) -> None:
        client = FakeFetchClient()

        app = DashboardApp(AppSettings(), client=client)

        assert app.client is client
