# -*- coding: utf-8 -*-
""" Global fixtures """

import pytest

from py_sdl import SchemaBuilder


@pytest.fixture
def g():
    """ Fresh schema builder, nothing is shared between tests. """
    return SchemaBuilder()


@pytest.fixture
def produce(g):
    return g.interface(
        "Produce",
        {
            "name": g.string(),
            "quantity": g.int(),
            "price": g.float(),
            "nutrients": g.string().optional().list().optional(),
        },
    )
