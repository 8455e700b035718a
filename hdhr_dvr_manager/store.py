# -----------------------------------------------------------------------------
# Copyright (c) 2020 J. Matt Roberts
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU General Public License
# as published by the Free Software Foundation; either version 2
# of the License, or (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program; if not, write to the
# Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor,
# Boston, MA  02110-1301, USA.
# -----------------------------------------------------------------------------


import json
import logging
import os
import tempfile

from hdhr_dvr_manager.const import KEEPS_FILE_FORMAT
from hdhr_dvr_manager.const import PROTECTS_FILE_FORMAT

logger = logging.getLogger(__name__)


class PersistenceError(Exception):
    pass


class PolicyStore:
    """Keep counts by series ID and protected program IDs for one device.

    Both mappings are read and written as a whole. Every change is written
    back to disk before the method that made it returns, so that the files
    never disagree with what the session believes.
    """

    def __init__(self, device_key, store_dir):
        self._device_key = device_key
        self._store_dir = os.path.expanduser(store_dir)
        self._keeps = {}
        self._protects = set()

    def __repr__(self):
        return(f'<PolicyStore device={self._device_key}'
               f':dir={self._store_dir}>'
               )

    @property
    def keeps_path(self):
        return(os.path.join(self._store_dir,
                            KEEPS_FILE_FORMAT.format(
                              device_key=self._device_key
                              )))

    @property
    def protects_path(self):
        return(os.path.join(self._store_dir,
                            PROTECTS_FILE_FORMAT.format(
                              device_key=self._device_key
                              )))

    @property
    def keeps(self):
        """Copy of the series ID -> keep count mapping"""
        return(dict(self._keeps))

    @property
    def protects(self):
        """Copy of the set of protected program IDs"""
        return(set(self._protects))

    def load_all(self):
        """Reads both files, creating empty ones on first use. Returns
        (keeps, protects)."""

        try:
            os.makedirs(self._store_dir, exist_ok=True)
        except OSError as e:
            raise PersistenceError(f'Unable to create {self._store_dir}: '
                                   f'{e}'
                                   ) from e

        if os.path.exists(self.keeps_path):
            keeps = {}
            try:
                for keep in self._read(self.keeps_path):
                    count = keep.get('EpisodesToKeep')
                    keeps[keep['SeriesID']] = (None if count is None
                                               else int(count)
                                               )
            except (AttributeError, KeyError, TypeError, ValueError) as e:
                raise PersistenceError(f'Malformed {self.keeps_path}: {e}'
                                       ) from e
            self._keeps = keeps
        else:
            logger.debug(f'Creating {self.keeps_path}')
            self.save_keeps({})

        if os.path.exists(self.protects_path):
            protects = self._read(self.protects_path)
            if (not isinstance(protects, list)
                    or not all(isinstance(p, str) for p in protects)):
                raise PersistenceError(f'Malformed {self.protects_path}: '
                                       'expected a list of program IDs'
                                       )
            self._protects = set(protects)
        else:
            logger.debug(f'Creating {self.protects_path}')
            self.save_protects(set())

        return(self.keeps, self.protects)

    def save_keeps(self, keeps=None):
        keeps = dict(self._keeps if keeps is None else keeps)
        self._write(self.keeps_path,
                    [{'SeriesID': series_id, 'EpisodesToKeep': count}
                     for series_id, count in keeps.items()
                     ])
        self._keeps = keeps

    def save_protects(self, protects=None):
        protects = set(self._protects if protects is None else protects)
        self._write(self.protects_path, sorted(protects))
        self._protects = protects

    def keep_count(self, series_id):
        """Number of recordings to keep, or None to keep all"""
        return(self._keeps.get(series_id))

    def is_protected(self, program_id):
        return(program_id in self._protects)

    def set_keep_count(self, series_id, count):
        """Applied in memory only once the file is written"""
        keeps = dict(self._keeps)
        if series_id in keeps:
            if count is not None:
                keeps[series_id] = count
            else:
                del keeps[series_id]
        elif count is not None:
            keeps[series_id] = count
        # No entry already means keep all, so there is nothing to add for
        # None. The file is still rewritten.
        self.save_keeps(keeps)

    def toggle_protect(self, program_id, want_protected):
        protects = set(self._protects)
        if want_protected:
            protects.add(program_id)
        else:
            protects.discard(program_id)
        self.save_protects(protects)

    def _read(self, path):
        try:
            with open(path, encoding='utf-8') as f:
                return(json.load(f))
        except (OSError, ValueError) as e:
            raise PersistenceError(f'Unable to read {path}: {e}') from e

    def _write(self, path, data):
        # A failed write leaves the previous file in place.
        try:
            fd, temp_path = tempfile.mkstemp(dir=self._store_dir,
                                             suffix='.tmp'
                                             )
            try:
                with os.fdopen(fd, 'w', encoding='utf-8') as f:
                    json.dump(data, f, indent=2)
                os.replace(temp_path, path)
            except BaseException:
                os.remove(temp_path)
                raise
        except OSError as e:
            raise PersistenceError(f'Unable to write {path}: {e}') from e

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
