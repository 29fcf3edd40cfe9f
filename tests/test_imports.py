"""
Smoke tests to verify all modules can be imported.
"""

def test_import_bestfit():
    import bestfit
    assert hasattr(bestfit, '__version__')


def test_import_instances():
    import instances
    assert hasattr(instances, '__version__')


def test_import_experiments():
    import experiments
    assert hasattr(experiments, '__version__')


def test_bestfit_exports():
    import bestfit
    for name in bestfit.__all__:
        assert hasattr(bestfit, name), name
    assert 'default_sort' in bestfit.__all__
