"""Read-only reference data consulted by StringSchema.

Character-class tables are keyed by locale, postal-code and IBAN tables by
ISO 3166-1 alpha-2 country code. The patterns follow validator.js
(https://github.com/validatorjs/validator.js). All patterns are meant to be
used with ``fullmatch``.
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Mapping


def _compile(pattern: str, ignore_case: bool = False) -> re.Pattern[str]:
    flags = re.IGNORECASE if ignore_case else 0
    # ASCII-only sources must not pick up Unicode digits or case folding
    if pattern.isascii():
        flags |= re.ASCII
    return re.compile(pattern, flags)


def _table(patterns: dict[str, tuple[str, bool]]) -> Mapping[str, re.Pattern[str]]:
    return MappingProxyType({key: _compile(src, icase) for key, (src, icase) in patterns.items()})


# from zod/src/types.ts
EMAIL = _compile(
    r"^(?!\.)(?!.*\.\.)([A-Z0-9_'+\-\.]*)[A-Z0-9_+-]@([A-Z0-9][A-Z0-9\-]*\.)+[A-Z]{2,}$",
    ignore_case=True,
)
BASE64 = _compile(r"^([0-9a-zA-Z+/]{4})*(([0-9a-zA-Z+/]{2}==)|([0-9a-zA-Z+/]{3}=))?$")
NUMERIC = _compile(r"^[0-9]+$")

_THREE_DIGIT = r"^\d{3}$"
_FOUR_DIGIT = r"^\d{4}$"
_FIVE_DIGIT = r"^\d{5}$"
_SIX_DIGIT = r"^\d{6}$"

POSTAL = _table({
    "AD": (r"^AD\d{3}$", False),
    "AT": (_FOUR_DIGIT, False),
    "AU": (_FOUR_DIGIT, False),
    "AZ": (r"^AZ\d{4}$", False),
    "BA": (r"^([7-8]\d{4}$)", False),
    "BE": (_FOUR_DIGIT, False),
    "BG": (_FOUR_DIGIT, False),
    "BR": (r"^\d{5}-?\d{3}$", False),
    "BY": (r"^2[1-4]\d{4}$", False),
    "CA": (r"^[ABCEGHJKLMNPRSTVXY]\d[ABCEGHJ-NPRSTV-Z][\s\-]?\d[ABCEGHJ-NPRSTV-Z]\d$", True),
    "CH": (_FOUR_DIGIT, False),
    "CN": (r"^(0[1-7]|1[012356]|2[0-7]|3[0-6]|4[0-7]|5[1-7]|6[1-7]|7[1-5]|8[1345]|9[09])\d{4}$", False),
    "CO": (r"^(05|08|11|13|15|17|18|19|20|23|25|27|41|44|47|50|52|54|63|66|68|70|73|76|81|85|86|88|91|94|95|97|99)(\d{4})$", False),
    "CZ": (r"^\d{3}\s?\d{2}$", False),
    "DE": (_FIVE_DIGIT, False),
    "DK": (_FOUR_DIGIT, False),
    "DO": (_FIVE_DIGIT, False),
    "DZ": (_FIVE_DIGIT, False),
    "EE": (_FIVE_DIGIT, False),
    "ES": (r"^(5[0-2]{1}|[0-4]{1}\d{1})\d{3}$", False),
    "FI": (_FIVE_DIGIT, False),
    "FR": (r"^(?:(?:0[1-9]|[1-8]\d|9[0-5])\d{3}|97[1-46]\d{2})$", False),
    "GB": (r"^(gir\s?0aa|[a-z]{1,2}\d[\da-z]?\s?(\d[a-z]{2})?)$", True),
    "GR": (r"^\d{3}\s?\d{2}$", False),
    "HR": (r"^([1-5]\d{4}$)", False),
    "HT": (r"^HT\d{4}$", False),
    "HU": (_FOUR_DIGIT, False),
    "ID": (_FIVE_DIGIT, False),
    "IE": (r"^(?!.*(?:o))[A-Za-z]\d[\dw]\s\w{4}$", True),
    "IL": (r"^(\d{5}|\d{7})$", False),
    "IN": (r"^((?!10|29|35|54|55|65|66|86|87|88|89)[1-9][0-9]{5})$", False),
    "IR": (r"^(?!(\d)\1{3})[13-9]{4}[1346-9][013-9]{5}$", False),
    "IS": (_THREE_DIGIT, False),
    "IT": (_FIVE_DIGIT, False),
    "JP": (r"^\d{3}\-\d{4}$", False),
    "KE": (_FIVE_DIGIT, False),
    "KR": (r"^(\d{5}|\d{6})$", False),
    "LI": (r"^(948[5-9]|949[0-7])$", False),
    "LT": (r"^LT\-\d{5}$", False),
    "LU": (_FOUR_DIGIT, False),
    "LV": (r"^LV\-\d{4}$", False),
    "LK": (_FIVE_DIGIT, False),
    "MG": (_THREE_DIGIT, False),
    "MX": (_FIVE_DIGIT, False),
    "MT": (r"^[A-Za-z]{3}\s{0,1}\d{4}$", False),
    "MY": (_FIVE_DIGIT, False),
    "NL": (r"^[1-9]\d{3}\s?(?!sa|sd|ss)[a-z]{2}$", True),
    "NO": (_FOUR_DIGIT, False),
    "NP": (r"^(10|21|22|32|33|34|44|45|56|57)\d{3}$|^(977)$", True),
    "NZ": (_FOUR_DIGIT, False),
    "PK": (_FIVE_DIGIT, False),
    "PL": (r"^\d{2}\-\d{3}$", False),
    "PR": (r"^00[679]\d{2}([ -]\d{4})?$", False),
    "PT": (r"^\d{4}\-\d{3}?$", False),
    "RO": (_SIX_DIGIT, False),
    "RU": (_SIX_DIGIT, False),
    "SA": (_FIVE_DIGIT, False),
    "SE": (r"^[1-9]\d{2}\s?\d{2}$", False),
    "SG": (_SIX_DIGIT, False),
    "SI": (_FOUR_DIGIT, False),
    "SK": (r"^\d{3}\s?\d{2}$", False),
    "TH": (_FIVE_DIGIT, False),
    "TN": (_FOUR_DIGIT, False),
    "TW": (r"^\d{3}(\d{2,3})?$", False),
    "UA": (_FIVE_DIGIT, False),
    "US": (r"^\d{5}(-\d{4})?$", False),
    "ZA": (_FOUR_DIGIT, False),
    "ZM": (_FIVE_DIGIT, False),
})

ALPHA = _table({
    "en-US": (r"^[A-Z]+$", True),
    "az-AZ": (r"^[A-VXYZÇƏĞİıÖŞÜ]+$", True),
    "bg-BG": (r"^[А-Я]+$", True),
    "cs-CZ": (r"^[A-ZÁČĎÉĚÍŇÓŘŠŤÚŮÝŽ]+$", True),
    "da-DK": (r"^[A-ZÆØÅ]+$", True),
    "de-DE": (r"^[A-ZÄÖÜß]+$", True),
    "el-GR": (r"^[Α-ώ]+$", True),
    "es-ES": (r"^[A-ZÁÉÍÑÓÚÜ]+$", True),
    "fa-IR": (r"^[ابپتثجچحخدذرزژسشصضطظعغفقکگلمنوهی]+$", True),
    "fi-FI": (r"^[A-ZÅÄÖ]+$", True),
    "fr-FR": (r"^[A-ZÀÂÆÇÉÈÊËÏÎÔŒÙÛÜŸ]+$", True),
    "it-IT": (r"^[A-ZÀÉÈÌÎÓÒÙ]+$", True),
    "ja-JP": (r"^[ぁ-んァ-ヶｦ-ﾟ一-龠ー・。、]+$", True),
    "nb-NO": (r"^[A-ZÆØÅ]+$", True),
    "nl-NL": (r"^[A-ZÁÉËÏÓÖÜÚ]+$", True),
    "nn-NO": (r"^[A-ZÆØÅ]+$", True),
    "hu-HU": (r"^[A-ZÁÉÍÓÖŐÚÜŰ]+$", True),
    "pl-PL": (r"^[A-ZĄĆĘŚŁŃÓŻŹ]+$", True),
    "pt-PT": (r"^[A-ZÃÁÀÂÄÇÉÊËÍÏÕÓÔÖÚÜ]+$", True),
    "ru-RU": (r"^[А-ЯЁ]+$", True),
    "kk-KZ": (r"^[А-ЯЁ\u04D8\u04B0\u0406\u04A2\u0492\u04AE\u049A\u04E8\u04BA]+$", True),
    "sl-SI": (r"^[A-ZČĆĐŠŽ]+$", True),
    "sk-SK": (r"^[A-ZÁČĎÉÍŇÓŠŤÚÝŽĹŔĽÄÔ]+$", True),
    "sr-RS@latin": (r"^[A-ZČĆŽŠĐ]+$", True),
    "sr-RS": (r"^[А-ЯЂЈЉЊЋЏ]+$", True),
    "sv-SE": (r"^[A-ZÅÄÖ]+$", True),
    "th-TH": (r"^[ก-๐\s]+$", True),
    "tr-TR": (r"^[A-ZÇĞİıÖŞÜ]+$", True),
    "uk-UA": (r"^[А-ЩЬЮЯЄIЇҐі]+$", True),
    "vi-VN": (r"^[A-ZÀÁẠẢÃÂẦẤẬẨẪĂẰẮẶẲẴĐÈÉẸẺẼÊỀẾỆỂỄÌÍỊỈĨÒÓỌỎÕÔỒỐỘỔỖƠỜỚỢỞỠÙÚỤỦŨƯỪỨỰỬỮỲÝỴỶỸ]+$", True),
    "ko-KR": (r"^[ㄱ-ㅎㅏ-ㅣ가-힣]*$", False),
    "ku-IQ": (r"^[ئابپتجچحخدرڕزژسشعغفڤقکگلڵمنوۆھەیێيطؤثآإأكضصةظذ]+$", True),
    "ar": (r"^[ءآأؤإئابةتثجحخدذرزسشصضطظعغفقكلمنهوىيًٌٍَُِّْٰ]+$", False),
    "he": (r"^[א-ת]+$", False),
    "fa": (r"^['آاءأؤئبپتثجچحخدذرزژسشصضطظعغفقکگلمنوهةی']+$", True),
    "bn": (r"^['ঀঁংঃঅআইঈউঊঋঌএঐওঔকখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ়ঽািীুূৃৄেৈোৌ্ৎৗড়ঢ়য়ৠৡৢৣৰৱ৲৳৴৵৶৷৸৹৺৻']+$", False),
    "eo": (r"^[ABCĈD-GĜHĤIJĴK-PRSŜTUŬVZ]+$", True),
    "hi-IN": (r"^[\u0900-\u0961]+[\u0972-\u097F]*$", True),
    "si-LK": (r"^[\u0D80-\u0DFF]+$", False),
})

ALPHANUMERIC = _table({
    "en-US": (r"^[0-9A-Z]+$", True),
    "az-AZ": (r"^[0-9A-VXYZÇƏĞİıÖŞÜ]+$", True),
    "bg-BG": (r"^[0-9А-Я]+$", True),
    "cs-CZ": (r"^[0-9A-ZÁČĎÉĚÍŇÓŘŠŤÚŮÝŽ]+$", True),
    "da-DK": (r"^[0-9A-ZÆØÅ]+$", True),
    "de-DE": (r"^[0-9A-ZÄÖÜẞß]+$", True),
    "el-GR": (r"^[0-9Α-ω]+$", True),
    "es-ES": (r"^[0-9A-ZÁÉÍÑÓÚÜ]+$", True),
    "fi-FI": (r"^[0-9A-ZÅÄÖ]+$", True),
    "fr-FR": (r"^[0-9A-ZÀÂÆÇÉÈÊËÏÎÔŒÙÛÜŸ]+$", True),
    "it-IT": (r"^[0-9A-ZÀÉÈÌÎÓÒÙ]+$", True),
    "ja-JP": (r"^[0-9０-９ぁ-んァ-ヶｦ-ﾟ一-龠ー・。、]+$", True),
    "hu-HU": (r"^[0-9A-ZÁÉÍÓÖŐÚÜŰ]+$", True),
    "nb-NO": (r"^[0-9A-ZÆØÅ]+$", True),
    "nl-NL": (r"^[0-9A-ZÁÉËÏÓÖÜÚ]+$", True),
    "nn-NO": (r"^[0-9A-ZÆØÅ]+$", True),
    "pl-PL": (r"^[0-9A-ZĄĆĘŚŁŃÓŻŹ]+$", True),
    "pt-PT": (r"^[0-9A-ZÃÁÀÂÄÇÉÊËÍÏÕÓÔÖÚÜ]+$", True),
    "ru-RU": (r"^[0-9А-ЯЁ]+$", True),
    "kk-KZ": (r"^[0-9А-ЯЁ\u04D8\u04B0\u0406\u04A2\u0492\u04AE\u049A\u04E8\u04BA]+$", True),
    "sl-SI": (r"^[0-9A-ZČĆĐŠŽ]+$", True),
    "sk-SK": (r"^[0-9A-ZÁČĎÉÍŇÓŠŤÚÝŽĹŔĽÄÔ]+$", True),
    "sr-RS@latin": (r"^[0-9A-ZČĆŽŠĐ]+$", True),
    "sr-RS": (r"^[0-9А-ЯЂЈЉЊЋЏ]+$", True),
    "sv-SE": (r"^[0-9A-ZÅÄÖ]+$", True),
    "th-TH": (r"^[ก-๙\s]+$", True),
    "tr-TR": (r"^[0-9A-ZÇĞİıÖŞÜ]+$", True),
    "uk-UA": (r"^[0-9А-ЩЬЮЯЄIЇҐі]+$", True),
    "ko-KR": (r"^[0-9ㄱ-ㅎㅏ-ㅣ가-힣]*$", False),
    "ku-IQ": (r"^[٠١٢٣٤٥٦٧٨٩0-9ئابپتجچحخدرڕزژسشعغفڤقکگلڵمنوۆھەیێيطؤثآإأكضصةظذ]+$", True),
    "vi-VN": (r"^[0-9A-ZÀÁẠẢÃÂẦẤẬẨẪĂẰẮẶẲẴĐÈÉẸẺẼÊỀẾỆỂỄÌÍỊỈĨÒÓỌỎÕÔỒỐỘỔỖƠỜỚỢỞỠÙÚỤỦŨƯỪỨỰỬỮỲÝỴỶỸ]+$", True),
    "ar": (r"^[٠١٢٣٤٥٦٧٨٩0-9ءآأؤإئابةتثجحخدذرزسشصضطظعغفقكلمنهوىيًٌٍَُِّْٰ]+$", False),
    "he": (r"^[0-9א-ת]+$", False),
    "fa": (r"^['0-9آاءأؤئبپتثجچحخدذرزژسشصضطظعغفقکگلمنوهةی۱۲۳۴۵۶۷۸۹۰']+$", True),
    "bn": (r"^['ঀঁংঃঅআইঈউঊঋঌএঐওঔকখগঘঙচছজঝঞটঠডঢণতথদধনপফবভমযরলশষসহ়ঽািীুূৃৄেৈোৌ্ৎৗড়ঢ়য়ৠৡৢৣ০১২৩৪৫৬৭৮৯ৰৱ৲৳৴৵৶৷৸৹৺৻']+$", False),
    "eo": (r"^[0-9ABCĈD-GĜHĤIJĴK-PRSŜTUŬVZ]+$", True),
    "hi-IN": (r"^[\u0900-\u0963]+[\u0966-\u097F]*$", True),
    "si-LK": (r"^[0-9\u0D80-\u0DFF]+$", False),
})

# ISO 3166-1 alpha-2
COUNTRY_CODES = frozenset([
    "AD", "AE", "AF", "AG", "AI", "AL", "AM", "AO", "AQ", "AR", "AS", "AT", "AU", "AW", "AX", "AZ", "BA", "BB", "BD", "BE",
    "BF", "BG", "BH", "BI", "BJ", "BL", "BM", "BN", "BO", "BQ", "BR", "BS", "BT", "BV", "BW", "BY", "BZ", "CA", "CC", "CD",
    "CF", "CG", "CH", "CI", "CK", "CL", "CM", "CN", "CO", "CR", "CU", "CV", "CW", "CX", "CY", "CZ", "DE", "DJ", "DK", "DM",
    "DO", "DZ", "EC", "EE", "EG", "EH", "ER", "ES", "ET", "FI", "FJ", "FK", "FM", "FO", "FR", "GA", "GB", "GD", "GE", "GF",
    "GG", "GH", "GI", "GL", "GM", "GN", "GP", "GQ", "GR", "GS", "GT", "GU", "GW", "GY", "HK", "HM", "HN", "HR", "HT", "HU",
    "ID", "IE", "IL", "IM", "IN", "IO", "IQ", "IR", "IS", "IT", "JE", "JM", "JO", "JP", "KE", "KG", "KH", "KI", "KM", "KN",
    "KP", "KR", "KW", "KY", "KZ", "LA", "LB", "LC", "LI", "LK", "LR", "LS", "LT", "LU", "LV", "LY", "MA", "MC", "MD", "ME",
    "MF", "MG", "MH", "MK", "ML", "MM", "MN", "MO", "MP", "MQ", "MR", "MS", "MT", "MU", "MV", "MW", "MX", "MY", "MZ", "NA",
    "NC", "NE", "NF", "NG", "NI", "NL", "NO", "NP", "NR", "NU", "NZ", "OM", "PA", "PE", "PF", "PG", "PH", "PK", "PL", "PM",
    "PN", "PR", "PS", "PT", "PW", "PY", "QA", "RE", "RO", "RS", "RU", "RW", "SA", "SB", "SC", "SD", "SE", "SG", "SH", "SI",
    "SJ", "SK", "SL", "SM", "SN", "SO", "SR", "SS", "ST", "SV", "SX", "SY", "SZ", "TC", "TD", "TF", "TG", "TH", "TJ", "TK",
    "TL", "TM", "TN", "TO", "TR", "TT", "TV", "TW", "TZ", "UA", "UG", "UM", "US", "UY", "UZ", "VA", "VC", "VE", "VG", "VI",
    "VN", "VU", "WF", "WS", "YE", "YT", "ZA", "ZM", "ZW",
])

IBAN = _table({
    "AD": (r"^(AD[0-9]{2})\d{8}[A-Z0-9]{12}$", False),
    "AE": (r"^(AE[0-9]{2})\d{3}\d{16}$", False),
    "AL": (r"^(AL[0-9]{2})\d{8}[A-Z0-9]{16}$", False),
    "AT": (r"^(AT[0-9]{2})\d{16}$", False),
    "AZ": (r"^(AZ[0-9]{2})[A-Z0-9]{4}\d{20}$", False),
    "BA": (r"^(BA[0-9]{2})\d{16}$", False),
    "BE": (r"^(BE[0-9]{2})\d{12}$", False),
    "BG": (r"^(BG[0-9]{2})[A-Z]{4}\d{6}[A-Z0-9]{8}$", False),
    "BH": (r"^(BH[0-9]{2})[A-Z]{4}[A-Z0-9]{14}$", False),
    "BR": (r"^(BR[0-9]{2})\d{23}[A-Z]{1}[A-Z0-9]{1}$", False),
    "BY": (r"^(BY[0-9]{2})[A-Z0-9]{4}\d{20}$", False),
    "CH": (r"^(CH[0-9]{2})\d{5}[A-Z0-9]{12}$", False),
    "CR": (r"^(CR[0-9]{2})\d{18}$", False),
    "CY": (r"^(CY[0-9]{2})\d{8}[A-Z0-9]{16}$", False),
    "CZ": (r"^(CZ[0-9]{2})\d{20}$", False),
    "DE": (r"^(DE[0-9]{2})\d{18}$", False),
    "DK": (r"^(DK[0-9]{2})\d{14}$", False),
    "DO": (r"^(DO[0-9]{2})[A-Z]{4}\d{20}$", False),
    "DZ": (r"^(DZ\d{24})$", False),
    "EE": (r"^(EE[0-9]{2})\d{16}$", False),
    "EG": (r"^(EG[0-9]{2})\d{25}$", False),
    "ES": (r"^(ES[0-9]{2})\d{20}$", False),
    "FI": (r"^(FI[0-9]{2})\d{14}$", False),
    "FO": (r"^(FO[0-9]{2})\d{14}$", False),
    "FR": (r"^(FR[0-9]{2})\d{10}[A-Z0-9]{11}\d{2}$", False),
    "GB": (r"^(GB[0-9]{2})[A-Z]{4}\d{14}$", False),
    "GE": (r"^(GE[0-9]{2})[A-Z0-9]{2}\d{16}$", False),
    "GI": (r"^(GI[0-9]{2})[A-Z]{4}[A-Z0-9]{15}$", False),
    "GL": (r"^(GL[0-9]{2})\d{14}$", False),
    "GR": (r"^(GR[0-9]{2})\d{7}[A-Z0-9]{16}$", False),
    "GT": (r"^(GT[0-9]{2})[A-Z0-9]{4}[A-Z0-9]{20}$", False),
    "HR": (r"^(HR[0-9]{2})\d{17}$", False),
    "HU": (r"^(HU[0-9]{2})\d{24}$", False),
    "IE": (r"^(IE[0-9]{2})[A-Z]{4}\d{14}$", False),
    "IL": (r"^(IL[0-9]{2})\d{19}$", False),
    "IQ": (r"^(IQ[0-9]{2})[A-Z]{4}\d{15}$", False),
    "IR": (r"^(IR[0-9]{2})0\d{2}0\d{18}$", False),
    "IS": (r"^(IS[0-9]{2})\d{22}$", False),
    "IT": (r"^(IT[0-9]{2})[A-Z]{1}\d{10}[A-Z0-9]{12}$", False),
    "JO": (r"^(JO[0-9]{2})[A-Z]{4}\d{22}$", False),
    "KW": (r"^(KW[0-9]{2})[A-Z]{4}[A-Z0-9]{22}$", False),
    "KZ": (r"^(KZ[0-9]{2})\d{3}[A-Z0-9]{13}$", False),
    "LB": (r"^(LB[0-9]{2})\d{4}[A-Z0-9]{20}$", False),
    "LC": (r"^(LC[0-9]{2})[A-Z]{4}[A-Z0-9]{24}$", False),
    "LI": (r"^(LI[0-9]{2})\d{5}[A-Z0-9]{12}$", False),
    "LT": (r"^(LT[0-9]{2})\d{16}$", False),
    "LU": (r"^(LU[0-9]{2})\d{3}[A-Z0-9]{13}$", False),
    "LV": (r"^(LV[0-9]{2})[A-Z]{4}[A-Z0-9]{13}$", False),
    "MA": (r"^(MA[0-9]{26})$", False),
    "MC": (r"^(MC[0-9]{2})\d{10}[A-Z0-9]{11}\d{2}$", False),
    "MD": (r"^(MD[0-9]{2})[A-Z0-9]{20}$", False),
    "ME": (r"^(ME[0-9]{2})\d{18}$", False),
    "MK": (r"^(MK[0-9]{2})\d{3}[A-Z0-9]{10}\d{2}$", False),
    "MR": (r"^(MR[0-9]{2})\d{23}$", False),
    "MT": (r"^(MT[0-9]{2})[A-Z]{4}\d{5}[A-Z0-9]{18}$", False),
    "MU": (r"^(MU[0-9]{2})[A-Z]{4}\d{19}[A-Z]{3}$", False),
    "MZ": (r"^(MZ[0-9]{2})\d{21}$", False),
    "NL": (r"^(NL[0-9]{2})[A-Z]{4}\d{10}$", False),
    "NO": (r"^(NO[0-9]{2})\d{11}$", False),
    "PK": (r"^(PK[0-9]{2})[A-Z0-9]{4}\d{16}$", False),
    "PL": (r"^(PL[0-9]{2})\d{24}$", False),
    "PS": (r"^(PS[0-9]{2})[A-Z]{4}[A-Z0-9]{21}$", False),
    "PT": (r"^(PT[0-9]{2})\d{21}$", False),
    "QA": (r"^(QA[0-9]{2})[A-Z]{4}[A-Z0-9]{21}$", False),
    "RO": (r"^(RO[0-9]{2})[A-Z]{4}[A-Z0-9]{16}$", False),
    "RS": (r"^(RS[0-9]{2})\d{18}$", False),
    "SA": (r"^(SA[0-9]{2})\d{2}[A-Z0-9]{18}$", False),
    "SC": (r"^(SC[0-9]{2})[A-Z]{4}\d{20}[A-Z]{3}$", False),
    "SE": (r"^(SE[0-9]{2})\d{20}$", False),
    "SI": (r"^(SI[0-9]{2})\d{15}$", False),
    "SK": (r"^(SK[0-9]{2})\d{20}$", False),
    "SM": (r"^(SM[0-9]{2})[A-Z]{1}\d{10}[A-Z0-9]{12}$", False),
    "SV": (r"^(SV[0-9]{2})[A-Z0-9]{4}\d{20}$", False),
    "TL": (r"^(TL[0-9]{2})\d{19}$", False),
    "TN": (r"^(TN[0-9]{2})\d{20}$", False),
    "TR": (r"^(TR[0-9]{2})\d{5}[A-Z0-9]{17}$", False),
    "UA": (r"^(UA[0-9]{2})\d{6}[A-Z0-9]{19}$", False),
    "VA": (r"^(VA[0-9]{2})\d{18}$", False),
    "VG": (r"^(VG[0-9]{2})[A-Z]{4}\d{16}$", False),
    "XK": (r"^(XK[0-9]{2})\d{16}$", False),
})

BIC = _compile(r"^[A-Za-z]{6}[A-Za-z0-9]{2}([A-Za-z0-9]{3})?$")

_IPV4_SEGMENT = r"(?:[0-9]|[1-9][0-9]|1[0-9][0-9]|2[0-4][0-9]|25[0-5])"
_IPV4_ADDRESS = rf"({_IPV4_SEGMENT}[.]){{3}}{_IPV4_SEGMENT}"
_IPV6_SEGMENT = r"(?:[0-9a-fA-F]{1,4})"

IPV4 = _compile(rf"^{_IPV4_ADDRESS}$")
IPV6 = _compile(
    "^("
    rf"(?:{_IPV6_SEGMENT}:){{7}}(?:{_IPV6_SEGMENT}|:)|"
    rf"(?:{_IPV6_SEGMENT}:){{6}}(?:{_IPV4_ADDRESS}|:{_IPV6_SEGMENT}|:)|"
    rf"(?:{_IPV6_SEGMENT}:){{5}}(?::{_IPV4_ADDRESS}|(:{_IPV6_SEGMENT}){{1,2}}|:)|"
    rf"(?:{_IPV6_SEGMENT}:){{4}}(?:(:{_IPV6_SEGMENT}){{0,1}}:{_IPV4_ADDRESS}|(:{_IPV6_SEGMENT}){{1,3}}|:)|"
    rf"(?:{_IPV6_SEGMENT}:){{3}}(?:(:{_IPV6_SEGMENT}){{0,2}}:{_IPV4_ADDRESS}|(:{_IPV6_SEGMENT}){{1,4}}|:)|"
    rf"(?:{_IPV6_SEGMENT}:){{2}}(?:(:{_IPV6_SEGMENT}){{0,3}}:{_IPV4_ADDRESS}|(:{_IPV6_SEGMENT}){{1,5}}|:)|"
    rf"(?:{_IPV6_SEGMENT}:){{1}}(?:(:{_IPV6_SEGMENT}){{0,4}}:{_IPV4_ADDRESS}|(:{_IPV6_SEGMENT}){{1,6}}|:)|"
    rf"(?::((?::{_IPV6_SEGMENT}){{0,5}}:{_IPV4_ADDRESS}|(?::{_IPV6_SEGMENT}){{1,7}}|:))"
    r")(%[0-9a-zA-Z.]{1,})?$"
)

IP_VERSIONS: Mapping[int, re.Pattern[str]] = MappingProxyType({4: IPV4, 6: IPV6})
