# -*- coding: utf-8 -*-
import pytest

import hkmatching


@pytest.fixture(autouse=True)
def add_default_names(doctest_namespace):
    doctest_namespace['__name__'] = '__main__'

    for name in hkmatching.__all__:
        doctest_namespace[name] = getattr(hkmatching, name)
