"""
Language data for releaseinfo.

Bundled ISO 639 languages with their English display names. The language
suffix pattern is built from whatever provider it is given; the default
provider adds the names in the system default locale and the native names
from the CLDR data shipped with babel.
"""

from functools import lru_cache
from typing import Dict, Iterable, NamedTuple, Optional, Tuple

from babel import Locale, UnknownLocaleError, default_locale

from releaseinfo.utils.logger import get_logger

logger = get_logger(__name__)


class Language(NamedTuple):
    code: str
    code3: str
    names: Tuple[str, ...]


# ISO 639-1 code, ISO 639-2/T code, English name
ISO_LANGUAGES = [
    ('aa', 'aar', 'Afar'), ('ab', 'abk', 'Abkhazian'), ('ae', 'ave', 'Avestan'),
    ('af', 'afr', 'Afrikaans'), ('ak', 'aka', 'Akan'), ('am', 'amh', 'Amharic'),
    ('an', 'arg', 'Aragonese'), ('ar', 'ara', 'Arabic'), ('as', 'asm', 'Assamese'),
    ('av', 'ava', 'Avaric'), ('ay', 'aym', 'Aymara'), ('az', 'aze', 'Azerbaijani'),
    ('ba', 'bak', 'Bashkir'), ('be', 'bel', 'Belarusian'), ('bg', 'bul', 'Bulgarian'),
    ('bh', 'bih', 'Bihari'), ('bi', 'bis', 'Bislama'), ('bm', 'bam', 'Bambara'),
    ('bn', 'ben', 'Bengali'), ('bo', 'bod', 'Tibetan'), ('br', 'bre', 'Breton'),
    ('bs', 'bos', 'Bosnian'), ('ca', 'cat', 'Catalan'), ('ce', 'che', 'Chechen'),
    ('ch', 'cha', 'Chamorro'), ('co', 'cos', 'Corsican'), ('cr', 'cre', 'Cree'),
    ('cs', 'ces', 'Czech'), ('cu', 'chu', 'Church Slavic'), ('cv', 'chv', 'Chuvash'),
    ('cy', 'cym', 'Welsh'), ('da', 'dan', 'Danish'), ('de', 'deu', 'German'),
    ('dv', 'div', 'Divehi'), ('dz', 'dzo', 'Dzongkha'), ('ee', 'ewe', 'Ewe'),
    ('el', 'ell', 'Greek'), ('en', 'eng', 'English'), ('eo', 'epo', 'Esperanto'),
    ('es', 'spa', 'Spanish'), ('et', 'est', 'Estonian'), ('eu', 'eus', 'Basque'),
    ('fa', 'fas', 'Persian'), ('ff', 'ful', 'Fulah'), ('fi', 'fin', 'Finnish'),
    ('fj', 'fij', 'Fijian'), ('fo', 'fao', 'Faroese'), ('fr', 'fra', 'French'),
    ('fy', 'fry', 'Western Frisian'), ('ga', 'gle', 'Irish'), ('gd', 'gla', 'Scottish Gaelic'),
    ('gl', 'glg', 'Galician'), ('gn', 'grn', 'Guarani'), ('gu', 'guj', 'Gujarati'),
    ('gv', 'glv', 'Manx'), ('ha', 'hau', 'Hausa'), ('he', 'heb', 'Hebrew'),
    ('hi', 'hin', 'Hindi'), ('ho', 'hmo', 'Hiri Motu'), ('hr', 'hrv', 'Croatian'),
    ('ht', 'hat', 'Haitian'), ('hu', 'hun', 'Hungarian'), ('hy', 'hye', 'Armenian'),
    ('hz', 'her', 'Herero'), ('ia', 'ina', 'Interlingua'), ('id', 'ind', 'Indonesian'),
    ('ie', 'ile', 'Interlingue'), ('ig', 'ibo', 'Igbo'), ('ii', 'iii', 'Sichuan Yi'),
    ('ik', 'ipk', 'Inupiaq'), ('io', 'ido', 'Ido'), ('is', 'isl', 'Icelandic'),
    ('it', 'ita', 'Italian'), ('iu', 'iku', 'Inuktitut'), ('ja', 'jpn', 'Japanese'),
    ('jv', 'jav', 'Javanese'), ('ka', 'kat', 'Georgian'), ('kg', 'kon', 'Kongo'),
    ('ki', 'kik', 'Kikuyu'), ('kj', 'kua', 'Kuanyama'), ('kk', 'kaz', 'Kazakh'),
    ('kl', 'kal', 'Kalaallisut'), ('km', 'khm', 'Khmer'), ('kn', 'kan', 'Kannada'),
    ('ko', 'kor', 'Korean'), ('kr', 'kau', 'Kanuri'), ('ks', 'kas', 'Kashmiri'),
    ('ku', 'kur', 'Kurdish'), ('kv', 'kom', 'Komi'), ('kw', 'cor', 'Cornish'),
    ('ky', 'kir', 'Kirghiz'), ('la', 'lat', 'Latin'), ('lb', 'ltz', 'Luxembourgish'),
    ('lg', 'lug', 'Ganda'), ('li', 'lim', 'Limburgish'), ('ln', 'lin', 'Lingala'),
    ('lo', 'lao', 'Lao'), ('lt', 'lit', 'Lithuanian'), ('lu', 'lub', 'Luba-Katanga'),
    ('lv', 'lav', 'Latvian'), ('mg', 'mlg', 'Malagasy'), ('mh', 'mah', 'Marshallese'),
    ('mi', 'mri', 'Maori'), ('mk', 'mkd', 'Macedonian'), ('ml', 'mal', 'Malayalam'),
    ('mn', 'mon', 'Mongolian'), ('mr', 'mar', 'Marathi'), ('ms', 'msa', 'Malay'),
    ('mt', 'mlt', 'Maltese'), ('my', 'mya', 'Burmese'), ('na', 'nau', 'Nauru'),
    ('nb', 'nob', 'Norwegian Bokmål'), ('nd', 'nde', 'North Ndebele'), ('ne', 'nep', 'Nepali'),
    ('ng', 'ndo', 'Ndonga'), ('nl', 'nld', 'Dutch'), ('nn', 'nno', 'Norwegian Nynorsk'),
    ('no', 'nor', 'Norwegian'), ('nr', 'nbl', 'South Ndebele'), ('nv', 'nav', 'Navajo'),
    ('ny', 'nya', 'Nyanja'), ('oc', 'oci', 'Occitan'), ('oj', 'oji', 'Ojibwa'),
    ('om', 'orm', 'Oromo'), ('or', 'ori', 'Oriya'), ('os', 'oss', 'Ossetic'),
    ('pa', 'pan', 'Punjabi'), ('pi', 'pli', 'Pali'), ('pl', 'pol', 'Polish'),
    ('ps', 'pus', 'Pashto'), ('pt', 'por', 'Portuguese'), ('qu', 'que', 'Quechua'),
    ('rm', 'roh', 'Romansh'), ('rn', 'run', 'Rundi'), ('ro', 'ron', 'Romanian'),
    ('ru', 'rus', 'Russian'), ('rw', 'kin', 'Kinyarwanda'), ('sa', 'san', 'Sanskrit'),
    ('sc', 'srd', 'Sardinian'), ('sd', 'snd', 'Sindhi'), ('se', 'sme', 'Northern Sami'),
    ('sg', 'sag', 'Sango'), ('si', 'sin', 'Sinhala'), ('sk', 'slk', 'Slovak'),
    ('sl', 'slv', 'Slovenian'), ('sm', 'smo', 'Samoan'), ('sn', 'sna', 'Shona'),
    ('so', 'som', 'Somali'), ('sq', 'sqi', 'Albanian'), ('sr', 'srp', 'Serbian'),
    ('ss', 'ssw', 'Swati'), ('st', 'sot', 'Southern Sotho'), ('su', 'sun', 'Sundanese'),
    ('sv', 'swe', 'Swedish'), ('sw', 'swa', 'Swahili'), ('ta', 'tam', 'Tamil'),
    ('te', 'tel', 'Telugu'), ('tg', 'tgk', 'Tajik'), ('th', 'tha', 'Thai'),
    ('ti', 'tir', 'Tigrinya'), ('tk', 'tuk', 'Turkmen'), ('tl', 'tgl', 'Tagalog'),
    ('tn', 'tsn', 'Tswana'), ('to', 'ton', 'Tonga'), ('tr', 'tur', 'Turkish'),
    ('ts', 'tso', 'Tsonga'), ('tt', 'tat', 'Tatar'), ('tw', 'twi', 'Twi'),
    ('ty', 'tah', 'Tahitian'), ('ug', 'uig', 'Uighur'), ('uk', 'ukr', 'Ukrainian'),
    ('ur', 'urd', 'Urdu'), ('uz', 'uzb', 'Uzbek'), ('ve', 'ven', 'Venda'),
    ('vi', 'vie', 'Vietnamese'), ('vo', 'vol', 'Volapük'), ('wa', 'wln', 'Walloon'),
    ('wo', 'wol', 'Wolof'), ('xh', 'xho', 'Xhosa'), ('yi', 'yid', 'Yiddish'),
    ('yo', 'yor', 'Yoruba'), ('za', 'zha', 'Zhuang'), ('zh', 'zho', 'Chinese'),
    ('zu', 'zul', 'Zulu'),
]

# Bibliographic ISO 639-2/B codes, common in release names (e.g. .fre.srt)
BIBLIOGRAPHIC_CODES = {
    'bod': 'tib', 'ces': 'cze', 'cym': 'wel', 'deu': 'ger', 'ell': 'gre',
    'eus': 'baq', 'fas': 'per', 'fra': 'fre', 'hye': 'arm', 'isl': 'ice',
    'kat': 'geo', 'mkd': 'mac', 'mri': 'mao', 'msa': 'may', 'mya': 'bur',
    'nld': 'dut', 'ron': 'rum', 'slk': 'slo', 'sqi': 'alb', 'zho': 'chi',
}


def english_languages():
    """Get the bundled languages with their English names."""
    return [Language(code, code3, (name,)) for code, code3, name in ISO_LANGUAGES]


@lru_cache(maxsize=None)
def locale_display_names(locale_name: str) -> Dict[str, Tuple[str, ...]]:
    """
    Get the names of the bundled languages as written in the given locale.

    Args:
        locale_name: Locale identifier such as 'de' or 'fr_FR'

    Returns:
        Mapping of two-letter code to display names; empty if the locale is unknown
    """
    try:
        locale = Locale.parse(locale_name)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning(f"Unknown locale {locale_name}: {e}")
        return {}

    return {code: (locale.languages[code],) for code, _, _ in ISO_LANGUAGES if code in locale.languages}


@lru_cache(maxsize=None)
def native_display_names() -> Dict[str, Tuple[str, ...]]:
    """Get the name of each bundled language in that language (Deutsch, français)."""
    names = {}
    for code, _, _ in ISO_LANGUAGES:
        try:
            name = Locale.parse(code).get_language_name()
        except (UnknownLocaleError, ValueError):
            continue
        if name:
            names[code] = (name,)
    return names


def default_languages():
    """
    Get the bundled languages with their English names, their names in the
    system default locale, and their native names.
    """
    languages = english_languages()

    system_locale = default_locale()
    if system_locale:
        languages = with_display_names(languages, locale_display_names(system_locale))

    return with_display_names(languages, native_display_names())


def with_display_names(languages: Iterable[Language], display_names: Dict[str, Iterable[str]]):
    """
    Add display names from another locale to a set of languages.

    Args:
        languages: Languages to extend
        display_names: Mapping of two-letter code to extra display names

    Returns:
        List of languages with the extra names appended
    """
    extended = []
    for language in languages:
        extra = tuple(name for name in display_names.get(language.code, ()) if name not in language.names)
        extended.append(language._replace(names=language.names + extra))
    return extended


def language_tokens(languages: Optional[Iterable[Language]] = None):
    """
    Collect every code and display name of the given languages.

    Returns:
        Sorted list of unique non-empty tokens
    """
    if languages is None:
        languages = default_languages()

    tokens = set()
    for language in languages:
        tokens.add(language.code)
        tokens.add(language.code3)
        if language.code3 in BIBLIOGRAPHIC_CODES:
            tokens.add(BIBLIOGRAPHIC_CODES[language.code3])
        tokens.update(language.names)

    tokens.discard('')
    return sorted(tokens)
