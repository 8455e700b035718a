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


import logging

from hdhr_dvr_manager.hdhr import errors

logger = logging.getLogger(__name__)


class NotFoundError(Exception):
    pass


class Inventory:
    """In-memory snapshot of one device's series, recordings and channels.

    Series and recordings are numbered 1..N in the order the device reports
    them each time they are fetched. Those numbers are only good until the
    next fetch; the policy store is keyed by series and program IDs.
    """

    def __init__(self, device, store):
        self.device = device
        self.store = store
        self._series = []
        self._series_loaded = False
        self._channels = []
        self._rules = []

    @property
    def series(self):
        return(self._series)

    @property
    def channels(self):
        return(self._channels)

    def refresh_series(self, force=False):
        if self._series_loaded and not force:
            logger.debug('Using cached series list')
            return(self._series)

        all_series = self.device.all_recorded_series()
        for seq, series in enumerate(all_series, start=1):
            series.seq = seq
            series.keep_count = self.store.keep_count(series.series_id)

        self._series = all_series
        self._series_loaded = True
        logger.debug(f'Found {len(all_series)} series')
        return(self._series)

    def refresh_recordings(self, series, force=False):
        if series is None:
            raise NotFoundError('Series not found')
        if series.recordings and not force:
            return(series.recordings)

        recordings = self.device.recorded_episodes(series.episodes_url)
        for seq, recording in enumerate(recordings, start=1):
            recording.seq = seq
            recording.protected = self.store.is_protected(
                                    recording.program_id
                                    )

        series.recordings = recordings
        logger.debug(f'Found {len(recordings)} recordings for '
                     f'"{series.title}"'
                     )
        return(series.recordings)

    def refresh_all_recordings(self, force=False):
        for series in self.refresh_series():
            self.refresh_recordings(series, force)

    def refresh_channels(self, force=False):
        if self._channels and not force:
            return(self._channels)

        self._channels = self.device.channels()
        return(self._channels)

    def refresh_discovery(self):
        """Re-read device details such as free space"""
        self.device.refresh()

    def find_series(self, seq):
        """Returns the series with the given sequence number, or None"""
        for series in self._series:
            if series.seq == seq:
                return(series)
        return(None)

    def find_series_by_id(self, series_id):
        for series in self._series:
            if series.series_id == series_id:
                return(series)
        return(None)

    def find_recording(self, series, seq):
        """Returns the recording of the series with the given sequence
        number, or None"""
        for recording in series.recordings:
            if recording.seq == seq:
                return(recording)
        return(None)

    def newest_recordings(self, count=None):
        """All known recordings, newest first, optionally only the first
        count of them"""

        recordings = [recording for series in self._series
                      for recording in series.recordings
                      ]
        recordings.sort(key=lambda r: r.start_time or 0, reverse=True)
        if count is not None:
            recordings = recordings[:max(count, 0)]
        return(recordings)

    def file_size(self, recording):
        """Size of the recording in bytes, or None if it can't be
        determined. Probed once, then remembered."""

        if recording.file_size is None:
            try:
                recording.file_size = self.device.probe_file_size(
                                        recording.play_url
                                        )
            except errors.RemoteFailure as e:
                logger.debug(f'Unable to get size of {recording}: {e}')
        return(recording.file_size)

    def rules(self, force=False):
        if self._rules and not force:
            return(self._rules)

        self._rules = sorted(self.device.recording_rules(),
                             key=lambda r: r.priority, reverse=True
                             )
        return(self._rules)

    def status(self):
        return(self.device.status())

    def log(self):
        return(self.device.log())

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
