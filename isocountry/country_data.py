"""
Numeric codes, English short names and name aliases for every CountryCode.
"""

from __future__ import annotations

from typing import Dict, Tuple

from .country_codes import CountryCode

# CountryCode -> (ISO 3166-1 numeric code, English short name)
COUNTRY_DATA: Dict[CountryCode, Tuple[int, str]] = {
    CountryCode.UNSPECIFIED: (0, ""),
    CountryCode.AD: (20, "Andorra"),
    CountryCode.AE: (784, "United Arab Emirates"),
    CountryCode.AF: (4, "Afghanistan"),
    CountryCode.AG: (28, "Antigua and Barbuda"),
    CountryCode.AI: (660, "Anguilla"),
    CountryCode.AL: (8, "Albania"),
    CountryCode.AM: (51, "Armenia"),
    CountryCode.AO: (24, "Angola"),
    CountryCode.AQ: (10, "Antarctica"),
    CountryCode.AR: (32, "Argentina"),
    CountryCode.AS: (16, "American Samoa"),
    CountryCode.AT: (40, "Austria"),
    CountryCode.AU: (36, "Australia"),
    CountryCode.AW: (533, "Aruba"),
    CountryCode.AX: (248, "Åland Islands"),
    CountryCode.AZ: (31, "Azerbaijan"),
    CountryCode.BA: (70, "Bosnia and Herzegovina"),
    CountryCode.BB: (52, "Barbados"),
    CountryCode.BD: (50, "Bangladesh"),
    CountryCode.BE: (56, "Belgium"),
    CountryCode.BF: (854, "Burkina Faso"),
    CountryCode.BG: (100, "Bulgaria"),
    CountryCode.BH: (48, "Bahrain"),
    CountryCode.BI: (108, "Burundi"),
    CountryCode.BJ: (204, "Benin"),
    CountryCode.BL: (652, "Saint Barthélemy"),
    CountryCode.BM: (60, "Bermuda"),
    CountryCode.BN: (96, "Brunei Darussalam"),
    CountryCode.BO: (68, "Bolivia (Plurinational State of)"),
    CountryCode.BQ: (535, "Bonaire, Sint Eustatius and Saba"),
    CountryCode.BR: (76, "Brazil"),
    CountryCode.BS: (44, "Bahamas"),
    CountryCode.BT: (64, "Bhutan"),
    CountryCode.BV: (74, "Bouvet Island"),
    CountryCode.BW: (72, "Botswana"),
    CountryCode.BY: (112, "Belarus"),
    CountryCode.BZ: (84, "Belize"),
    CountryCode.CA: (124, "Canada"),
    CountryCode.CC: (166, "Cocos (Keeling) Islands"),
    CountryCode.CD: (180, "Congo (Democratic Republic of the)"),
    CountryCode.CF: (140, "Central African Republic"),
    CountryCode.CG: (178, "Congo"),
    CountryCode.CH: (756, "Switzerland"),
    CountryCode.CI: (384, "Côte d'Ivoire"),
    CountryCode.CK: (184, "Cook Islands"),
    CountryCode.CL: (152, "Chile"),
    CountryCode.CM: (120, "Cameroon"),
    CountryCode.CN: (156, "China"),
    CountryCode.CO: (170, "Colombia"),
    CountryCode.CR: (188, "Costa Rica"),
    CountryCode.CU: (192, "Cuba"),
    CountryCode.CV: (132, "Cabo Verde"),
    CountryCode.CW: (531, "Curaçao"),
    CountryCode.CX: (162, "Christmas Island"),
    CountryCode.CY: (196, "Cyprus"),
    CountryCode.CZ: (203, "Czech Republic"),
    CountryCode.DE: (276, "Germany"),
    CountryCode.DJ: (262, "Djibouti"),
    CountryCode.DK: (208, "Denmark"),
    CountryCode.DM: (212, "Dominica"),
    CountryCode.DO: (214, "Dominican Republic"),
    CountryCode.DZ: (12, "Algeria"),
    CountryCode.EC: (218, "Ecuador"),
    CountryCode.EE: (233, "Estonia"),
    CountryCode.EG: (818, "Egypt"),
    CountryCode.EH: (732, "Western Sahara"),
    CountryCode.ER: (232, "Eritrea"),
    CountryCode.ES: (724, "Spain"),
    CountryCode.ET: (231, "Ethiopia"),
    CountryCode.FI: (246, "Finland"),
    CountryCode.FJ: (242, "Fiji"),
    CountryCode.FK: (238, "Falkland Islands"),
    CountryCode.FM: (583, "Micronesia (Federated States of)"),
    CountryCode.FO: (234, "Faroe Islands"),
    CountryCode.FR: (250, "France"),
    CountryCode.GA: (266, "Gabon"),
    CountryCode.GB: (826, "United Kingdom of Great Britain and Northern Ireland"),
    CountryCode.GD: (308, "Grenada"),
    CountryCode.GE: (268, "Georgia"),
    CountryCode.GF: (254, "French Guiana"),
    CountryCode.GG: (831, "Guernsey"),
    CountryCode.GH: (288, "Ghana"),
    CountryCode.GI: (292, "Gibraltar"),
    CountryCode.GL: (304, "Greenland"),
    CountryCode.GM: (270, "Gambia"),
    CountryCode.GN: (324, "Guinea"),
    CountryCode.GP: (312, "Guadeloupe"),
    CountryCode.GQ: (226, "Equatorial Guinea"),
    CountryCode.GR: (300, "Greece"),
    CountryCode.GS: (239, "South Georgia and the South Sandwich Islands"),
    CountryCode.GT: (320, "Guatemala"),
    CountryCode.GU: (316, "Guam"),
    CountryCode.GW: (624, "Guinea-Bissau"),
    CountryCode.GY: (328, "Guyana"),
    CountryCode.HK: (344, "Hong Kong"),
    CountryCode.HM: (334, "Heard Island and McDonald Islands"),
    CountryCode.HN: (340, "Honduras"),
    CountryCode.HR: (191, "Croatia"),
    CountryCode.HT: (332, "Haiti"),
    CountryCode.HU: (348, "Hungary"),
    CountryCode.ID: (360, "Indonesia"),
    CountryCode.IE: (372, "Ireland"),
    CountryCode.IL: (376, "Israel"),
    CountryCode.IM: (833, "Isle of Man"),
    CountryCode.IN: (356, "India"),
    CountryCode.IO: (86, "British Indian Ocean Territory"),
    CountryCode.IQ: (368, "Iraq"),
    CountryCode.IR: (364, "Iran (Islamic Republic of)"),
    CountryCode.IS: (352, "Iceland"),
    CountryCode.IT: (380, "Italy"),
    CountryCode.JE: (832, "Jersey"),
    CountryCode.JM: (388, "Jamaica"),
    CountryCode.JO: (400, "Jordan"),
    CountryCode.JP: (392, "Japan"),
    CountryCode.KE: (404, "Kenya"),
    CountryCode.KG: (417, "Kyrgyzstan"),
    CountryCode.KH: (116, "Cambodia"),
    CountryCode.KI: (296, "Kiribati"),
    CountryCode.KM: (174, "Comoros"),
    CountryCode.KN: (659, "Saint Kitts and Nevis"),
    CountryCode.KP: (408, "Korea (Democratic People's Republic of)"),
    CountryCode.KR: (410, "Korea (Republic of)"),
    CountryCode.KW: (414, "Kuwait"),
    CountryCode.KY: (136, "Cayman Islands"),
    CountryCode.KZ: (398, "Kazakhstan"),
    CountryCode.LA: (418, "Lao People's Democratic Republic"),
    CountryCode.LB: (422, "Lebanon"),
    CountryCode.LC: (662, "Saint Lucia"),
    CountryCode.LI: (438, "Liechtenstein"),
    CountryCode.LK: (144, "Sri Lanka"),
    CountryCode.LR: (430, "Liberia"),
    CountryCode.LS: (426, "Lesotho"),
    CountryCode.LT: (440, "Lithuania"),
    CountryCode.LU: (442, "Luxembourg"),
    CountryCode.LV: (428, "Latvia"),
    CountryCode.LY: (434, "Libya"),
    CountryCode.MA: (504, "Morocco"),
    CountryCode.MC: (492, "Monaco"),
    CountryCode.MD: (498, "Moldova (Republic of)"),
    CountryCode.ME: (499, "Montenegro"),
    CountryCode.MF: (663, "Saint Martin (French part)"),
    CountryCode.MG: (450, "Madagascar"),
    CountryCode.MH: (584, "Marshall Islands"),
    CountryCode.MK: (807, "Macedonia (the former Yugoslav Republic of)"),
    CountryCode.ML: (466, "Mali"),
    CountryCode.MM: (104, "Myanmar"),
    CountryCode.MN: (496, "Mongolia"),
    CountryCode.MO: (446, "Macao"),
    CountryCode.MP: (580, "Northern Mariana Islands"),
    CountryCode.MQ: (474, "Martinique"),
    CountryCode.MR: (478, "Mauritania"),
    CountryCode.MS: (500, "Montserrat"),
    CountryCode.MT: (470, "Malta"),
    CountryCode.MU: (480, "Mauritius"),
    CountryCode.MV: (462, "Maldives"),
    CountryCode.MW: (454, "Malawi"),
    CountryCode.MX: (484, "Mexico"),
    CountryCode.MY: (458, "Malaysia"),
    CountryCode.MZ: (508, "Mozambique"),
    CountryCode.NA: (516, "Namibia"),
    CountryCode.NC: (540, "New Caledonia"),
    CountryCode.NE: (562, "Niger"),
    CountryCode.NF: (574, "Norfolk Island"),
    CountryCode.NG: (566, "Nigeria"),
    CountryCode.NI: (558, "Nicaragua"),
    CountryCode.NL: (528, "Netherlands"),
    CountryCode.NO: (578, "Norway"),
    CountryCode.NP: (524, "Nepal"),
    CountryCode.NR: (520, "Nauru"),
    CountryCode.NU: (570, "Niue"),
    CountryCode.NZ: (554, "New Zealand"),
    CountryCode.OM: (512, "Oman"),
    CountryCode.PA: (591, "Panama"),
    CountryCode.PE: (604, "Peru"),
    CountryCode.PF: (258, "French Polynesia"),
    CountryCode.PG: (598, "Papua New Guinea"),
    CountryCode.PH: (608, "Philippines"),
    CountryCode.PK: (586, "Pakistan"),
    CountryCode.PL: (616, "Poland"),
    CountryCode.PM: (666, "Saint Pierre and Miquelon"),
    CountryCode.PN: (612, "Pitcairn"),
    CountryCode.PR: (630, "Puerto Rico"),
    CountryCode.PS: (275, "Palestine, State of"),
    CountryCode.PT: (620, "Portugal"),
    CountryCode.PW: (585, "Palau"),
    CountryCode.PY: (600, "Paraguay"),
    CountryCode.QA: (634, "Qatar"),
    CountryCode.RE: (638, "Réunion"),
    CountryCode.RO: (642, "Romania"),
    CountryCode.RS: (688, "Serbia"),
    CountryCode.RU: (643, "Russian Federation"),
    CountryCode.RW: (646, "Rwanda"),
    CountryCode.SA: (682, "Saudi Arabia"),
    CountryCode.SB: (90, "Solomon Islands"),
    CountryCode.SC: (690, "Seychelles"),
    CountryCode.SD: (729, "Sudan"),
    CountryCode.SE: (752, "Sweden"),
    CountryCode.SG: (702, "Singapore"),
    CountryCode.SH: (654, "Saint Helena, Ascension and Tristan da Cunha"),
    CountryCode.SI: (705, "Slovenia"),
    CountryCode.SJ: (744, "Svalbard and Jan Mayen"),
    CountryCode.SK: (703, "Slovakia"),
    CountryCode.SL: (694, "Sierra Leone"),
    CountryCode.SM: (674, "San Marino"),
    CountryCode.SN: (686, "Senegal"),
    CountryCode.SO: (706, "Somalia"),
    CountryCode.SR: (740, "Suriname"),
    CountryCode.SS: (728, "South Sudan"),
    CountryCode.ST: (678, "Sao Tome and Principe"),
    CountryCode.SV: (222, "El Salvador"),
    CountryCode.SX: (534, "Sint Maarten (Dutch part)"),
    CountryCode.SY: (760, "Syrian Arab Republic"),
    CountryCode.SZ: (748, "Swaziland"),
    CountryCode.TC: (796, "Turks and Caicos Islands"),
    CountryCode.TD: (148, "Chad"),
    CountryCode.TF: (260, "French Southern Territories"),
    CountryCode.TG: (768, "Togo"),
    CountryCode.TH: (764, "Thailand"),
    CountryCode.TJ: (762, "Tajikistan"),
    CountryCode.TK: (772, "Tokelau"),
    CountryCode.TL: (626, "Timor-Leste"),
    CountryCode.TM: (795, "Turkmenistan"),
    CountryCode.TN: (788, "Tunisia"),
    CountryCode.TO: (776, "Tonga"),
    CountryCode.TR: (792, "Turkey"),
    CountryCode.TT: (780, "Trinidad and Tobago"),
    CountryCode.TV: (798, "Tuvalu"),
    CountryCode.TW: (158, "Taiwan, Province of China[a]"),
    CountryCode.TZ: (834, "Tanzania, United Republic of"),
    CountryCode.UA: (804, "Ukraine"),
    CountryCode.UG: (800, "Uganda"),
    CountryCode.UM: (581, "United States Minor Outlying Islands"),
    CountryCode.US: (840, "United States of America"),
    CountryCode.UY: (858, "Uruguay"),
    CountryCode.UZ: (860, "Uzbekistan"),
    CountryCode.VA: (336, "Holy See"),
    CountryCode.VC: (670, "Saint Vincent and the Grenadines"),
    CountryCode.VE: (862, "Venezuela (Bolivarian Republic of)"),
    CountryCode.VG: (92, "Virgin Islands (British)"),
    CountryCode.VI: (850, "Virgin Islands (U.S.)"),
    CountryCode.VN: (704, "Viet Nam"),
    CountryCode.VU: (548, "Vanuatu"),
    CountryCode.WF: (876, "Wallis and Futuna"),
    CountryCode.WS: (882, "Samoa"),
    CountryCode.YE: (887, "Yemen"),
    CountryCode.YT: (175, "Mayotte"),
    CountryCode.ZA: (710, "South Africa"),
    CountryCode.ZM: (894, "Zambia"),
    CountryCode.ZW: (716, "Zimbabwe"),
}

# Alternate and shortened names accepted by from_name in addition to the
# short names above. Keep this set closed: callers rely on exact matches.
NAME_ALIASES: Dict[str, CountryCode] = {
    "Micronesia": CountryCode.FM,
    "United Kingdom of Great Britain": CountryCode.GB,
    "Iran": CountryCode.IR,
    "Macedonia": CountryCode.MK,
    "Tanzania": CountryCode.TZ,
    "Venezuela": CountryCode.VE,
}
