# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for theme update checking.

Defines the InstalledTheme, CatalogEntry, UpdateDescriptor and
UpdateListing models shared by the catalog provider and the update
resolver.

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-02-06

Modified
--------
2026-02-06
"""

# Standard library
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


class InstalledTheme:
    """A theme present in the local installation.

    Parameters
    ----------
    slug : str
        Stylesheet folder name. Unique per installation.
    version : str
        Installed version string.
    name : str
        Display name.
    tags : Optional[List[str]]
        Declared tags, in declaration order.
    author : str
        Author name.
    description : str
        Human-readable description.
    homepage_uri : str
        Declared theme homepage, may be empty.
    template : Optional[str]
        Parent template folder for a child theme.
    """

    def __init__(
        self,
        slug: str,
        version: str,
        name: str = "",
        tags: Optional[List[str]] = None,
        author: str = "",
        description: str = "",
        homepage_uri: str = "",
        template: Optional[str] = None,
    ) -> None:
        if not slug:
            raise ValueError("slug must be a non-empty string")
        self.slug = slug
        self.version = version
        self.name = name or slug
        self.tags = list(tags or [])
        self.author = author
        self.description = description
        self.homepage_uri = homepage_uri
        self.template = template or None

    def __repr__(self) -> str:
        return (
            f"InstalledTheme(slug={self.slug!r}, version={self.version!r})"
        )


@dataclass(frozen=True)
class CatalogEntry:
    """Latest known release of one theme in the remote catalog."""

    version: Optional[str] = None
    package_uri: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CatalogEntry':
        """Build an entry from a raw ``{version, package, updated}`` record."""
        version = data.get('version')
        package = data.get('package')
        updated = data.get('updated')
        return cls(
            version=str(version) if version not in (None, '') else None,
            package_uri=str(package) if package not in (None, '') else None,
            updated_at=str(updated) if updated is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': self.version,
            'package': self.package_uri,
            'updated': self.updated_at,
        }


@dataclass
class UpdateDescriptor:
    """Describes an available update for one installed theme.

    Attributes
    ----------
    slug : str
        Slug of the installed theme.
    new_version : str
        Version offered by the catalog.
    info_uri : str
        Page describing the new version.
    package_uri : Optional[str]
        Download location, if the catalog provides one.
    author : str
    tags : List[str]
    fields : Dict[str, Any]
        Display bundle shown by the host's theme details view.
    """

    slug: str
    new_version: str
    info_uri: str
    package_uri: Optional[str] = None
    author: str = ""
    tags: List[str] = field(default_factory=list)
    fields: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to the host's update-listing record shape."""
        return {
            'theme': self.slug,
            'new_version': self.new_version,
            'url': self.info_uri,
            'package': self.package_uri,
            'author': self.author,
            'Tag': list(self.tags),
            'fields': dict(self.fields),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UpdateDescriptor':
        return cls(
            slug=data['theme'],
            new_version=data['new_version'],
            info_uri=data.get('url', ''),
            package_uri=data.get('package'),
            author=data.get('author', ''),
            tags=list(data.get('Tag') or []),
            fields=dict(data.get('fields') or {}),
        )


@dataclass
class UpdateListing:
    """Host update listing mutated by the resolver.

    Attributes
    ----------
    checked : Dict[str, str]
        Slug to installed version for every theme the host asked about.
        An empty mapping means no check was requested this cycle.
    response : Dict[str, UpdateDescriptor]
        Slug to descriptor for every theme with an available update.
    """

    checked: Dict[str, str] = field(default_factory=dict)
    response: Dict[str, UpdateDescriptor] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'checked': dict(self.checked),
            'response': {
                slug: descriptor.to_dict()
                for slug, descriptor in self.response.items()
            },
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UpdateListing':
        """Deserialize from a dictionary.

        Parameters
        ----------
        data : Dict[str, Any]
            Dictionary with ``checked`` and ``response`` keys. Either may
            be missing.

        Returns
        -------
        UpdateListing
        """
        response = {
            slug: UpdateDescriptor.from_dict(record)
            for slug, record in (data.get('response') or {}).items()
        }
        return cls(checked=dict(data.get('checked') or {}), response=response)
