"""Documents and schemas shared by the checker and linter tests."""


PRODUCT_SCHEMA = {
    "id": "integer",
    "name": "string",
}

CATEGORY_WITH_PRODUCTS_SCHEMA = {
    "id": "integer",
    "name": "string",
    "products": {
        "id": "integer",
        "name": "string",
        "images": {
            "id": "integer",
            "filename": "string",
        },
    },
}

CATEGORY_SCHEMA = {
    "id": "integer",
    "name": "string",
    "products": {
        "nullable": True,
        "id": "integer",
        "name": "string",
    },
}

USER_SCHEMA = {
    "id": "integer",
    "username": "string",
    "avatar": "string|nullable",
    "roles": ["string|nullable"],
    "enabled": "boolean",
}

PRODUCT = {"id": 1, "name": "test product"}

INVALID_TYPE_PRODUCT = {"id": "abc", "name": "test product"}

MISSING_KEY_PRODUCT = {"id": 1}

CATEGORY = {"id": 1, "name": "test category", "products": []}

CATEGORY_WITH_PRODUCTS = {
    "id": 1,
    "name": "test category",
    "products": [
        {
            "id": 1,
            "name": "test product",
            "images": [
                {"id": 1, "filename": "test.png"},
            ],
        },
    ],
}

USER = {
    "id": 1,
    "username": "test",
    "avatar": "pic.jpg",
    "roles": ["ROLE_ADMIN"],
    "enabled": True,
}

USER_WITHOUT_ROLES = {
    "id": 1,
    "username": "test",
    "avatar": "pic.jpg",
    "roles": [],
    "enabled": True,
}
