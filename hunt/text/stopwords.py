"""
Base stopword list.

Common English function words, matched against lowercased tokens after
punctuation stripping, so contractions appear without apostrophes
("didn't" -> "didnt"). Contractions that collide with real words once the
apostrophe is gone ("we'll" -> "well", "she'll" -> "shell") are left out.

Applications append to this list through
HuntConfig.additional_words_to_ignore.
"""

BASE_STOPWORDS = frozenset([
    'about', 'above', 'after', 'again', 'against', 'all', 'am', 'an', 'and',
    'any', 'are', 'arent', 'as', 'at',
    'be', 'because', 'been', 'before', 'being', 'below', 'between', 'both',
    'but', 'by',
    'cannot', 'cant', 'could', 'couldnt',
    'did', 'didnt', 'do', 'does', 'doesnt', 'doing', 'dont', 'down', 'during',
    'each',
    'few', 'for', 'from', 'further',
    'had', 'hadnt', 'has', 'hasnt', 'have', 'havent', 'having', 'he', 'hed',
    'her', 'here', 'heres', 'hers', 'herself', 'hes', 'him', 'himself', 'his',
    'how', 'hows',
    'if', 'im', 'in', 'into', 'is', 'isnt', 'it', 'its', 'itself', 'ive',
    'lets',
    'me', 'more', 'most', 'mustnt', 'my', 'myself',
    'no', 'nor', 'not',
    'of', 'off', 'on', 'once', 'only', 'or', 'other', 'ought', 'our', 'ours',
    'ourselves', 'out', 'over', 'own',
    'same', 'shant', 'she', 'shes', 'should', 'shouldnt', 'so', 'some', 'such',
    'than', 'that', 'thats', 'the', 'their', 'theirs', 'them', 'themselves',
    'then', 'there', 'theres', 'these', 'they', 'theyd', 'theyll', 'theyre',
    'theyve', 'this', 'those', 'through', 'to', 'too',
    'under', 'until', 'up',
    'very',
    'was', 'wasnt', 'we', 'were', 'werent', 'weve', 'what', 'whats', 'when',
    'whens', 'where', 'wheres', 'which', 'while', 'who', 'whom', 'whos', 'why',
    'whys', 'with', 'wont', 'would', 'wouldnt',
    'you', 'youd', 'youll', 'your', 'youre', 'yours', 'yourself',
    'yourselves', 'youve',
])
