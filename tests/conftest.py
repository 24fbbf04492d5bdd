"""
Fixture condivise per i test del parser di slide.
"""

import pytest
from fastapi.testclient import TestClient

DI_DECK_SOURCE = """class: center, middle

# Dependency Injection

---

# Constructor injection

```java
public class OrderService {
    private final Repository<Order> repository;

    public OrderService(Repository<Order> repository) {
        this.repository = repository;
    }
}
```

---
name: config
class: inverse

# Wiring with YAML

```yaml
---
beans:
  - orderService
---
```

???
The YAML separators above belong to the code sample.

---
layout: false
count: false

# Questions?

--

Thanks!"""


@pytest.fixture
def di_deck_source():
    return DI_DECK_SOURCE


@pytest.fixture
def client():
    from remarkdeck.main import app
    with TestClient(app) as test_client:
        yield test_client
