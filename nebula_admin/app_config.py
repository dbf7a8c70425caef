default_config = dict(
    name='nebula',
    db_engine=dict(
        url='sqlite:///:memory:',
    ),
    resources=dict(
        namespaces=['app', 'app.models'],
        classes=[],
    ),
    logging=dict(
        level='INFO',
    ),
)
