# -*- coding: utf-8 -*-
from py_sdl import SchemaBuilder, config


g = SchemaBuilder()

ripeness = g.enum("Ripeness", ["UNRIPE", "RIPE", "OVERRIPE"])

produce = g.interface(
    "Produce",
    {
        "name": g.string().length(min=1, max=64).unique(),
        "quantity": g.int().default(0),
        "price": g.float().cache(300),
    },
)

sweets = g.interface("Sweets", {"name": g.string(), "sweetness": g.int()})

g.type(
    "Fruit",
    {
        "ripeness": g.enum_ref(ripeness).default("RIPE"),
        "supplier": g.email().optional().auth(lambda rules: rules.private()),
    },
).implements(produce).implements(sweets).cache(60, 30, "entity")


sdl = str(config(schema=g))
assert sdl.endswith(
    """type Fruit implements Produce & Sweets @cache(maxAge: 60, staleWhileRevalidate: 30, mutationInvalidation: entity) {
  name: String! @length(min: 1, max: 64) @unique
  quantity: Int! @default(value: 0)
  price: Float! @cache(maxAge: 300)
  sweetness: Int!
  ripeness: Ripeness! @default(value: RIPE)
  supplier: Email @auth(rules: [{ allow: private }])
}"""
)
print(sdl)
