"""Bundled locale and region metadata.

A portable replacement for the operating system's culture database: the
locale identifiers below are enumerated in order and each one resolves to the
region it names. Language-only locales (``"en"``, ``"es"``) have no region and
cannot be resolved.
"""

import re

from domain.exceptions.currency import RegionLookupError
from domain.models.currency import RegionCurrencyEntry

# ISO 3166 region -> (ISO 4217 currency, display symbol)
REGIONS: dict[str, tuple[str, str]] = {
	'AE': ('AED', 'د.إ.‏'),
	'AF': ('AFN', '؋'),
	'AL': ('ALL', 'Lekë'),
	'AM': ('AMD', '֏'),
	'AR': ('ARS', '$'),
	'AT': ('EUR', '€'),
	'AU': ('AUD', '$'),
	'AZ': ('AZN', '₼'),
	'BA': ('BAM', 'KM'),
	'BD': ('BDT', '৳'),
	'BE': ('EUR', '€'),
	'BG': ('BGN', 'лв.'),
	'BH': ('BHD', 'د.ب.‏'),
	'BO': ('BOB', 'Bs'),
	'BR': ('BRL', 'R$'),
	'BY': ('BYN', 'Br'),
	'BZ': ('BZD', '$'),
	'CA': ('CAD', '$'),
	'CH': ('CHF', 'CHF'),
	'CL': ('CLP', '$'),
	'CN': ('CNY', '¥'),
	'CO': ('COP', '$'),
	'CR': ('CRC', '₡'),
	'CU': ('CUP', '$'),
	'CZ': ('CZK', 'Kč'),
	'DE': ('EUR', '€'),
	'DK': ('DKK', 'kr.'),
	'DO': ('DOP', 'RD$'),
	'DZ': ('DZD', 'د.ج.‏'),
	'EC': ('USD', '$'),
	'EE': ('EUR', '€'),
	'EG': ('EGP', 'ج.م.‏'),
	'ES': ('EUR', '€'),
	'ET': ('ETB', 'ብር'),
	'FI': ('EUR', '€'),
	'FR': ('EUR', '€'),
	'GB': ('GBP', '£'),
	'GE': ('GEL', '₾'),
	'GH': ('GHS', 'GH₵'),
	'GR': ('EUR', '€'),
	'GT': ('GTQ', 'Q'),
	'HK': ('HKD', 'HK$'),
	'HN': ('HNL', 'L'),
	'HR': ('EUR', '€'),
	'HU': ('HUF', 'Ft'),
	'ID': ('IDR', 'Rp'),
	'IE': ('EUR', '€'),
	'IL': ('ILS', '₪'),
	'IN': ('INR', '₹'),
	'IQ': ('IQD', 'د.ع.‏'),
	'IR': ('IRR', 'ريال'),
	'IS': ('ISK', 'kr.'),
	'IT': ('EUR', '€'),
	'JM': ('JMD', '$'),
	'JO': ('JOD', 'د.ا.‏'),
	'JP': ('JPY', '¥'),
	'KE': ('KES', 'Ksh'),
	'KG': ('KGS', 'сом'),
	'KH': ('KHR', '៛'),
	'KR': ('KRW', '₩'),
	'KW': ('KWD', 'د.ك.‏'),
	'KZ': ('KZT', '₸'),
	'LB': ('LBP', 'ل.ل.‏'),
	'LK': ('LKR', 'රු.'),
	'LT': ('EUR', '€'),
	'LU': ('EUR', '€'),
	'LV': ('EUR', '€'),
	'LY': ('LYD', 'د.ل.‏'),
	'MA': ('MAD', 'د.م.‏'),
	'MD': ('MDL', 'L'),
	'MK': ('MKD', 'ден.'),
	'MN': ('MNT', '₮'),
	'MX': ('MXN', '$'),
	'MY': ('MYR', 'RM'),
	'NG': ('NGN', '₦'),
	'NI': ('NIO', 'C$'),
	'NL': ('EUR', '€'),
	'NO': ('NOK', 'kr'),
	'NP': ('NPR', 'रु'),
	'NZ': ('NZD', '$'),
	'OM': ('OMR', 'ر.ع.‏'),
	'PA': ('PAB', 'B/.'),
	'PE': ('PEN', 'S/'),
	'PH': ('PHP', '₱'),
	'PK': ('PKR', 'Rs'),
	'PL': ('PLN', 'zł'),
	'PR': ('USD', '$'),
	'PT': ('EUR', '€'),
	'PY': ('PYG', '₲'),
	'QA': ('QAR', 'ر.ق.‏'),
	'RO': ('RON', 'lei'),
	'RS': ('RSD', 'дин.'),
	'RU': ('RUB', '₽'),
	'SA': ('SAR', 'ر.س.‏'),
	'SE': ('SEK', 'kr'),
	'SG': ('SGD', '$'),
	'SI': ('EUR', '€'),
	'SK': ('EUR', '€'),
	'SV': ('USD', '$'),
	'SY': ('SYP', 'ل.س.‏'),
	'TH': ('THB', '฿'),
	'TJ': ('TJS', 'смн'),
	'TN': ('TND', 'د.ت.‏'),
	'TR': ('TRY', '₺'),
	'TT': ('TTD', '$'),
	'TW': ('TWD', 'NT$'),
	'UA': ('UAH', '₴'),
	'US': ('USD', '$'),
	'UY': ('UYU', '$'),
	'UZ': ('UZS', 'soʻm'),
	'VE': ('VES', 'Bs.S'),
	'VN': ('VND', '₫'),
	'YE': ('YER', 'ر.ي.‏'),
	'ZA': ('ZAR', 'R'),
	'ZW': ('USD', 'US$'),
}

LOCALE_NAMES: tuple[str, ...] = (
	'ar', 'ar-AE', 'ar-BH', 'ar-DZ', 'ar-EG', 'ar-IQ', 'ar-JO', 'ar-KW',
	'ar-LB', 'ar-LY', 'ar-MA', 'ar-OM', 'ar-QA', 'ar-SA', 'ar-SY', 'ar-TN',
	'ar-YE', 'am-ET', 'az-Latn-AZ', 'be-BY', 'bg-BG', 'bn-BD', 'bs-Latn-BA',
	'ca-ES', 'cs-CZ', 'da-DK', 'de', 'de-AT', 'de-CH', 'de-DE', 'de-LU',
	'el-GR', 'en', 'en-AU', 'en-BZ', 'en-CA', 'en-GB', 'en-GH', 'en-HK',
	'en-IE', 'en-IN', 'en-JM', 'en-KE', 'en-MY', 'en-NG', 'en-NZ', 'en-PH',
	'en-PK', 'en-SG', 'en-TT', 'en-US', 'en-ZA', 'en-ZW', 'es', 'es-AR',
	'es-BO', 'es-CL', 'es-CO', 'es-CR', 'es-CU', 'es-DO', 'es-EC', 'es-ES',
	'es-GT', 'es-HN', 'es-MX', 'es-NI', 'es-PA', 'es-PE', 'es-PR', 'es-PY',
	'es-SV', 'es-US', 'es-UY', 'es-VE', 'et-EE', 'fa-AF', 'fa-IR', 'fi-FI',
	'fr', 'fr-BE', 'fr-CA', 'fr-CH', 'fr-FR', 'fr-LU', 'fr-MA', 'ga-IE',
	'he-IL', 'hi-IN', 'hr-HR', 'hu-HU', 'hy-AM', 'id-ID', 'is-IS', 'it-CH',
	'it-IT', 'ja-JP', 'ka-GE', 'kk-KZ', 'km-KH', 'ko-KR', 'ky-KG', 'lt-LT',
	'lv-LV', 'mk-MK', 'mn-MN', 'ms-MY', 'nb-NO', 'ne-NP', 'nl-BE', 'nl-NL',
	'pl-PL', 'pt', 'pt-BR', 'pt-PT', 'ro-MD', 'ro-RO', 'ru-RU', 'ru-UA',
	'si-LK', 'sk-SK', 'sl-SI', 'sq-AL', 'sr-Cyrl-RS', 'sv-FI', 'sv-SE',
	'sw-KE', 'tg-Cyrl-TJ', 'th-TH', 'tr-TR', 'uk-UA', 'ur-PK', 'uz-Latn-UZ',
	'vi-VN', 'zh', 'zh-CN', 'zh-HK', 'zh-SG', 'zh-TW',
)

_REGION_SUBTAG = re.compile(r'^[A-Z]{2}$|^\d{3}$')


def get_region(locale_name: str) -> RegionCurrencyEntry:
	"""Resolve the region named by a locale identifier such as ``es-CO``.

	Raises ``RegionLookupError`` for language-only, malformed or unknown
	locales.
	"""
	if not isinstance(locale_name, str) or not locale_name:
		raise RegionLookupError(f'Invalid locale name: {locale_name!r}')

	subtags = locale_name.replace('_', '-').split('-')
	region = next((tag for tag in subtags[1:] if _REGION_SUBTAG.match(tag)), None)
	if region is None:
		raise RegionLookupError(f'Locale {locale_name} is neutral and has no region')

	try:
		currency_code, symbol = REGIONS[region]
	except KeyError as e:
		raise RegionLookupError(f'Unknown region {region} for locale {locale_name}') from e

	return RegionCurrencyEntry(region=region, currency_code=currency_code, symbol=symbol)
