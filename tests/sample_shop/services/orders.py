from typing import Optional, overload

from nano_ioc import service

from ..repositories import MyShopRepository
from ..tracking import track


@service
class OrderService:
    @overload
    def __init__(self) -> None: ...

    @overload
    def __init__(self, repository: MyShopRepository) -> None: ...

    def __init__(self, repository: Optional[MyShopRepository] = None) -> None:
        track(self)
        self.repository = repository
