"""A small shop prototype used across the test suite."""


def create_shop_document():
    """
    Return a REST-style export with two pages.

    Checkout page, in document order:
        Home (FRAME)            click -> Cart (navigate, dissolve)
          Buy Button (INSTANCE) hover -> Promo Dialog (overlay)
                                after 800ms -> 9:99 (swap, missing node)
          Help Link (TEXT)      click -> open URL
        Cart (FRAME)            click -> back
        Promo Dialog (COMPONENT)
        Empty Frame (FRAME)
    """
    return {
        "name": "Shop App",
        "document": {
            "id": "0:0",
            "name": "Document",
            "type": "DOCUMENT",
            "children": [
                {
                    "id": "0:1",
                    "name": "Checkout",
                    "type": "CANVAS",
                    "children": [
                        {
                            "id": "1:1",
                            "name": "Home",
                            "type": "FRAME",
                            "absoluteBoundingBox": {"x": 0, "y": 0, "width": 375, "height": 812},
                            "interactions": [
                                {
                                    "trigger": {"type": "ON_CLICK"},
                                    "actions": [
                                        {
                                            "type": "NODE",
                                            "destinationId": "1:2",
                                            "navigation": "NAVIGATE",
                                            "transition": {
                                                "type": "DISSOLVE",
                                                "duration": 0.3,
                                                "easing": {"type": "EASE_OUT"},
                                            },
                                        }
                                    ],
                                }
                            ],
                            "children": [
                                {
                                    "id": "1:10",
                                    "name": "Buy Button",
                                    "type": "INSTANCE",
                                    "absoluteBoundingBox": {"x": 20, "y": 700, "width": 120, "height": 44},
                                    "interactions": [
                                        {
                                            "trigger": {"type": "ON_HOVER"},
                                            "actions": [
                                                {
                                                    "type": "NODE",
                                                    "destinationId": "1:3",
                                                    "navigation": "OVERLAY",
                                                    "overlayRelativePosition": "TOP_CENTER",
                                                }
                                            ],
                                        },
                                        {
                                            "trigger": {"type": "AFTER_TIMEOUT", "timeout": 800},
                                            "actions": [
                                                {"type": "NODE", "destinationId": "9:99", "navigation": "SWAP"}
                                            ],
                                        },
                                    ],
                                },
                                {
                                    "id": "1:11",
                                    "name": "Help Link",
                                    "type": "TEXT",
                                    "interactions": [
                                        {
                                            "trigger": {"type": "ON_CLICK"},
                                            "actions": [{"type": "URL", "url": "https://example.com/help"}],
                                        }
                                    ],
                                },
                            ],
                        },
                        {
                            "id": "1:2",
                            "name": "Cart",
                            "type": "FRAME",
                            "absoluteBoundingBox": {"x": 500, "y": 0, "width": 375, "height": 812},
                            "interactions": [
                                {"trigger": {"type": "ON_CLICK"}, "actions": [{"type": "BACK"}]}
                            ],
                        },
                        {
                            "id": "1:3",
                            "name": "Promo Dialog",
                            "type": "COMPONENT",
                            "absoluteBoundingBox": {"x": 1000, "y": 0, "width": 300, "height": 200},
                        },
                        {
                            "id": "1:4",
                            "name": "Empty Frame",
                            "type": "FRAME",
                            "absoluteBoundingBox": {"x": 1500, "y": 0, "width": 100, "height": 100},
                        },
                    ],
                },
                {
                    "id": "0:2",
                    "name": "Archive",
                    "type": "CANVAS",
                    "children": [
                        {"id": "2:1", "name": "Old Home", "type": "FRAME", "width": 320, "height": 480},
                    ],
                },
            ],
        },
        "selection": ["1:2"],
    }
