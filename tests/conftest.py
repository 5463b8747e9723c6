import inspect
import os
import re
import unittest

from _pytest.unittest import UnitTestCase


class ScenarioTestCase(UnitTestCase):
    """Collector for a generated per-scenario class not bound in a module."""

    def __init__(self, *args, **kwargs):
        self._scenario_class = kwargs.pop('scenario_class')
        super(ScenarioTestCase, self).__init__(*args, **kwargs)

    def _getobj(self):
        return self._scenario_class


def pytest_pycollect_makeitem(collector, name, obj):
    """Expand testscenarios classes into one unittest class per scenario.

    pytest's unittest integration binds the test method onto the instance
    before calling run(), which defeats testscenarios' cloning of the test
    per scenario; apply each scenario as class attributes instead.
    """
    if not (inspect.isclass(obj) and issubclass(obj, unittest.TestCase)):
        return None
    scenarios = getattr(obj, 'scenarios', None)
    if not scenarios:
        return None
    items = []
    for scenario_name, attrs in scenarios:
        label = re.sub(r'\W', '_', os.path.basename(scenario_name))
        attrs = dict(attrs, scenarios=None)
        sub = type(obj.__name__, (obj,), attrs)
        sub.__module__ = obj.__module__
        items.append(ScenarioTestCase.from_parent(
            collector, name='{0}[{1}]'.format(name, label),
            scenario_class=sub))
    return items
