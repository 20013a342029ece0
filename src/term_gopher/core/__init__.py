"""Core components for the Gopher client."""

from .address import Address, ItemType, DEFAULT_PORT, parse_address
from .menu_parser import MenuEntry, MenuParser
from .classifier import Document, Menu, TextBody, BinaryBlob, ResponseClassifier
from .session import Session
from .navigator import Navigator
from .command_parser import (
    CommandParser,
    Command,
    NoOpCommand,
    SelectCommand,
    BackCommand,
    ForwardCommand,
    ReloadCommand,
    HelpCommand,
    GoCommand,
    CursorCommand,
    SaveCommand,
    WhereCommand,
    QuitCommand,
)
from .menu_renderer import MenuRenderer

__all__ = [
    "Address",
    "ItemType",
    "DEFAULT_PORT",
    "parse_address",
    "MenuEntry",
    "MenuParser",
    "Document",
    "Menu",
    "TextBody",
    "BinaryBlob",
    "ResponseClassifier",
    "Session",
    "Navigator",
    "CommandParser",
    "Command",
    "NoOpCommand",
    "SelectCommand",
    "BackCommand",
    "ForwardCommand",
    "ReloadCommand",
    "HelpCommand",
    "GoCommand",
    "CursorCommand",
    "SaveCommand",
    "WhereCommand",
    "QuitCommand",
    "MenuRenderer",
]
