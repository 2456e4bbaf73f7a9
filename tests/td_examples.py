#!/usr/bin/env python
# -*- coding: utf-8 -*-

TD_EXAMPLE = {
    "@context": [
        "https://www.w3.org/2022/wot/td/v1.1",
        {"saref": "https://w3id.org/saref#"}
    ],
    "id": "urn:dev:ops:32473-WoTLamp-1234",
    "title": "MyLampThing",
    "titles": {
        "en": "MyLampThing",
        "de": "MeinLampenDing"
    },
    "description": "MyLampThing uses JSON-LD 1.1 serialization",
    "securityDefinitions": {
        "basic_sc": {"scheme": "basic", "in": "header"},
        "nosec_sc": {"scheme": "nosec"}
    },
    "security": ["basic_sc"],
    "properties": {
        "status": {
            "@type": "saref:OnOffState",
            "description": "Shows the current status of the lamp",
            "type": "string",
            "enum": ["on", "off"],
            "readOnly": True,
            "forms": [{
                "href": "https://mylamp.example.com/status",
                "op": ["readproperty"],
                "htv:methodName": "GET"
            }]
        }
    },
    "actions": {
        "toggle": {
            "description": "Turn on or off the lamp",
            "input": {
                "type": "object",
                "properties": {
                    "state": {"type": "string", "enum": ["on", "off"]}
                },
                "required": ["state"]
            },
            "forms": [{"href": "https://mylamp.example.com/toggle"}]
        }
    },
    "events": {
        "overheating": {
            "description": "Lamp reaches a critical temperature (overheating)",
            "data": {"type": "string"},
            "forms": [{
                "href": "https://mylamp.example.com/oh",
                "subprotocol": "longpoll",
                "security": "nosec_sc"
            }]
        }
    },
    "links": [{
        "href": "https://mylamp.example.com/manual",
        "rel": "service-doc",
        "hreflang": "en"
    }]
}

TD_TEMPERATURE = {
    "@context": "https://www.w3.org/2022/wot/td/v1.1",
    "title": "TemperatureSensor",
    "securityDefinitions": {
        "nosec": {"scheme": "nosec"}
    },
    "security": ["nosec"],
    "properties": {
        "temperature": {
            "type": "number",
            "readOnly": True,
            "forms": [{
                "href": "https://dev/temp",
                "op": ["readproperty"]
            }]
        }
    }
}
