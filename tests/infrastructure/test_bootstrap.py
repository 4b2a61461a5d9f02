"""Tests for the composition root."""

import click

from pos.infrastructure.bootstrap import gateways, open_gateways
from pos.infrastructure.config import Settings
from pos.infrastructure.http.http_catalog_gateway import HttpCatalogGateway
from pos.infrastructure.persistence.json_catalog_gateway import JsonCatalogGateway


class TestGateways:

    def test_api_url_selects_http_gateways(self):
        wiring = gateways(Settings(api_url="http://pos.test/api"))

        assert isinstance(wiring.catalog, HttpCatalogGateway)
        assert wiring.api is not None
        wiring.close()
        assert wiring.api.client.is_closed

    def test_json_gateways_without_api(self, tmp_path):
        with gateways(Settings(data_dir=tmp_path)) as wiring:
            assert isinstance(wiring.catalog, JsonCatalogGateway)
            assert wiring.api is None

    def test_open_gateways_closes_client_when_command_ends(self):
        with click.Context(click.Command("sell")):
            wiring = open_gateways(Settings(api_url="http://pos.test/api"))
            assert not wiring.api.client.is_closed

        assert wiring.api.client.is_closed
