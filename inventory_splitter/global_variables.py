encoding = 'utf-8'

col_sep = '\t'
list_sep = '  '
score_sep = ':'
sense_infix = '#n#'

min_feature_len = 3
max_feature_num = 1000

preview_len = 100
progress_every = 10000

stopwords_env_var = 'INVENTORY_STOPWORDS'
stopwords_file = 'data/stopwords.csv'
