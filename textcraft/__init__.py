from .datatypes import (Sentence, Document, Edge, Graph, ScoredSentence, SummaryDetails, KeywordResult,
                        KeywordExtraction, AlgorithmProfile, ScoredAlgorithm, Recommendation,
                        SummarizeRequest, KeywordRequest, RecommendationRequest, ProcessingOptions,
                        ProcessingResult)
from .errors import TextcraftError, InvalidInputError, NoCompatibleAlgorithmError
from .config import BM25Config, SummaryConfig, KeywordConfig
from .preprocessing import STOPWORDS, preprocess_text, tokenize_sentences, tokenize_words
from .features import (compute_tf, compute_idf, compute_idf_smoothed, compute_tfidf, compute_bm25plus,
                       extract_phrases)
from .graphing import cosine_similarity, sentence_similarity, similarity_matrix, cluster_sentences, build_graph
from .summarize import summarize, summarize_with_details
from .keywords import extract_keywords
from .recommender import ALGORITHM_PROFILES, recommend
from .pipeline import process_text
from .logs import setup_logging
