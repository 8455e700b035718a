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


class Channel:
    _type_name = 'Channel'
    _json_attr_str_map = {'GuideNumber': '_guide_number',
                          'GuideName': '_guide_name',
                          'VideoCodec': '_video_codec',
                          'AudioCodec': '_audio_codec',
                          'URL': '_url',
                          }
    _json_attr_bool_map = {'HD': '_hd',
                           'Favorite': '_favorite',
                           'DRM': '_drm',
                           }

    # GuideNumber	"8.1"
    # GuideName	"WFAADT"
    # VideoCodec	"MPEG2"
    # AudioCodec	"AC3"
    # HD	1
    # URL	"http://192.168.1.104:5004/auto/v8.1"

    def __init__(self, json, seq=0):
        self.seq = seq
        for key, attr in self._json_attr_str_map.items():
            if key in json:
                setattr(self, attr, json[key])
        for key, attr in self._json_attr_bool_map.items():
            setattr(self, attr, bool(json.get(key, False)))

    def __repr__(self):
        return(f"<{self._type_name} seq={self.seq}"
               f":number={getattr(self, '_guide_number', '?')}>"
               )

    @property
    def guide_number(self):
        """Virtual channel number (e.g., 8.1)"""
        return(getattr(self, '_guide_number', ''))

    @property
    def guide_name(self):
        """Channel name/call-sign (e.g., WFAADT)"""
        return(getattr(self, '_guide_name', ''))

    @property
    def video_codec(self):
        return(getattr(self, '_video_codec', ''))

    @property
    def audio_codec(self):
        return(getattr(self, '_audio_codec', ''))

    @property
    def codecs(self):
        """Audio/video codecs as shown in listings, or '' if unknown"""
        if not self.audio_codec:
            return('')
        return(f'{self.audio_codec}/{self.video_codec}')

    @property
    def url(self):
        """HTTP URL to stream the channel"""
        return(getattr(self, '_url', ''))

    @property
    def hd(self):
        return(self._hd)

    @property
    def favorite(self):
        return(self._favorite)

# vim: set tabstop=8 softtabstop=0 expandtab shiftwidth=4 smarttab ai :
