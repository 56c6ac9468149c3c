import logging

from nltk.corpus import stopwords as nltk_stopwords

from inventory_splitter.global_variables import encoding

logging.basicConfig(format='%(asctime)s : %(levelname)s : %(message)s', level=logging.INFO)


def info(text):
    logging.info(text)


def warn(text):
    logging.warning(text)


def load_stopwords(file):
    # One stopword per line, stripped but not lowercased
    stopwords = set()
    try:
        with open(file, 'r', encoding=encoding) as stopwords_file:
            for line in stopwords_file:
                stopwords.add(line.strip())
    except (OSError, UnicodeDecodeError) as e:
        warn(f"Cannot load stopwords '{file}': {e}")
        return set()
    return stopwords


def load_nltk_stopwords(language):
    try:
        return set(nltk_stopwords.words(language))
    except (LookupError, OSError) as e:
        warn(f"Cannot load nltk stopwords for '{language}': {e}")
        return set()
