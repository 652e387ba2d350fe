from nano_ioc import configuration


@configuration
class ShopSettings:
    currency = "EUR"
