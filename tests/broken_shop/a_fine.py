from nano_ioc import component


@component
class Fine:
    pass
